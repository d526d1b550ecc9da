"""Tests for log masking and logger setup."""

import logging

import pytest

from common.logging_config import SensitiveDataFilter, setup_logging


def make_record(msg, args=()):
    return logging.LogRecord('test', logging.INFO, __file__, 1, msg, args, None)


@pytest.mark.parametrize('message', [
    'private_key=deadbeef',
    'secret: hunter2',
    'Authorization: Bearer-token',
])
def test_masks_credentials(message):
    record = make_record(message)

    SensitiveDataFilter().filter(record)

    assert '***MASKED***' in record.msg


def test_masks_32_byte_hex_values_but_not_addresses():
    key = '0x' + 'ab' * 32
    address = '0x77333Da3492C4BBB9CCF3EA5BB63D6202F86CDA8'
    record = make_record(f'signing with {key} for {address}')

    SensitiveDataFilter().filter(record)

    assert key not in record.msg
    assert address in record.msg


def test_masks_arguments():
    record = make_record('value %s', ('secret=abc',))

    SensitiveDataFilter().filter(record)

    assert record.args == ('secret=***MASKED***',)


def test_setup_logging_is_idempotent():
    logger = setup_logging('filestorage-test-component', log_level='debug')
    again = setup_logging('filestorage-test-component', log_level='debug')

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert not logger.propagate
