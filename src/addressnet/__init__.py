"""Immutable network endpoint addresses.

.. include:: ../../README.md
"""
from loguru import logger

from .address import (
    LOOPBACK_ALIASES,
    NULL_ADDRESS,
    Address,
    InvalidAddressError,
    UnresolvableHostError,
    get_local_ip_address,
)

logger.disable("addressnet")

__all__=[
    'Address',
    'InvalidAddressError',
    'LOOPBACK_ALIASES',
    'NULL_ADDRESS',
    'UnresolvableHostError',
    'get_local_ip_address',
]
