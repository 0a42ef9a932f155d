# SPDX-License-Identifier: MIT

__all__ = ['Error', 'DHCPv4Error', 'MalformedError', 'TruncatedError',
	'BadMagicCookieError', 'OptionDecodeError', 'InvalidStringError',
	'InvalidValueError', 'EncodeError']


class Error(Exception):
	"""Base class for DHCP errors"""
	pass


class DHCPv4Error(Error):
	"""Base class for DHCPv4 errors"""
	pass


class MalformedError(DHCPv4Error):
	"""Received data does not follow the BOOTP/DHCP wire format"""
	pass


class TruncatedError(MalformedError):
	"""Buffer ends before the record it should hold"""

	def __init__(self, what, needed, available):
		super().__init__('%s too short: need %d bytes, got %d'
			% (what, needed, available))
		self.needed = needed
		self.available = available


class BadMagicCookieError(MalformedError):
	def __init__(self, cookie):
		super().__init__('bad magic cookie: %r' % cookie)
		self.cookie = cookie


class OptionDecodeError(MalformedError):
	def __init__(self, offset, error):
		super().__init__('failed to parse option at offset %d: %s'
			% (offset, error))
		self.offset = offset


class InvalidStringError(DHCPv4Error):
	"""Option data is not valid UTF-8"""
	pass


class InvalidValueError(DHCPv4Error):
	"""Data cannot be viewed as the requested type"""
	pass


class EncodeError(DHCPv4Error):
	"""Value cannot be represented in its wire field"""
	pass

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
