"""
Key String Generator

Kvrocks keys for the seat inventory:
- ``seats:index``  set of every seat id
- ``seat:{id}``    hash with fields ``id`` and ``booked`` ('0' / '1')
- ``bookings``     list of JSON booking documents
"""

import os


def _get_key_prefix() -> str:
    """Read at call time so tests can set KVROCKS_KEY_PREFIX after import"""
    return os.getenv('KVROCKS_KEY_PREFIX', '')


def _make_key(key: str) -> str:
    return f'{_get_key_prefix()}{key}'


def make_seat_index_key() -> str:
    return _make_key('seats:index')


def make_seat_key(*, seat_id: str) -> str:
    return _make_key(f'seat:{seat_id}')


def make_bookings_key() -> str:
    return _make_key('bookings')
