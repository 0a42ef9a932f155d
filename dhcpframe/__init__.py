"""dhcpframe

BOOTP/DHCP frame and option codec

"""

__version__ = '0.1.0'
__date__ = '2026-10-17'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'

from . import v4 as ipv4
from .error import (Error, DHCPv4Error, MalformedError, TruncatedError,
	BadMagicCookieError, OptionDecodeError, InvalidStringError,
	InvalidValueError, EncodeError)

__all__ = ['ipv4', 'Error', 'DHCPv4Error', 'MalformedError',
	'TruncatedError', 'BadMagicCookieError', 'OptionDecodeError',
	'InvalidStringError', 'InvalidValueError', 'EncodeError']

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
