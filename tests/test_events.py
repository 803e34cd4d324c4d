from dataclasses import dataclass

from softy.events import EventChannel, WindowCreatedEvent, fnv1a_hash, type_id


@dataclass(frozen=True)
class Resized:
    width: int


def test_fnv1a_empty_is_offset_basis():
    assert fnv1a_hash("") == 2166136261


def test_fnv1a_known_vector():
    assert fnv1a_hash("a") == 0xE40C292C


def test_fnv1a_str_and_bytes_agree():
    assert fnv1a_hash("softy") == fnv1a_hash(b"softy")
    assert 0 <= fnv1a_hash("softy") <= 0xFFFFFFFF


def test_type_id_stable_and_distinct():
    assert type_id(WindowCreatedEvent) == type_id(type(WindowCreatedEvent()))
    assert type_id(WindowCreatedEvent) != type_id(Resized)


def test_send_reaches_subscriber():
    channel = EventChannel()
    received = []
    channel.subscribe(Resized, received.append)
    channel.send(Resized(640))
    assert received == [Resized(640)]


def test_send_without_subscriber_is_ignored():
    channel = EventChannel()
    received = []
    channel.subscribe(Resized, received.append)
    channel.send(WindowCreatedEvent())
    assert received == []


def test_subscribe_replaces_handler():
    channel = EventChannel()
    first, second = [], []
    channel.subscribe(WindowCreatedEvent, first.append)
    channel.subscribe(WindowCreatedEvent, second.append)
    channel.send(WindowCreatedEvent())
    assert first == []
    assert second == [WindowCreatedEvent()]