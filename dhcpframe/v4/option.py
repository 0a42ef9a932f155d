# SPDX-License-Identifier: MIT

__all__ = ['Option']

import struct
from ipaddress import IPv4Address

from .optiontags import OptionTag, lookup
from ..error import (MalformedError, TruncatedError, InvalidStringError,
	InvalidValueError, EncodeError)

MAX_DATA_LENGTH = 0xFF

uint8 = struct.Struct('!B')
uint16 = struct.Struct('!H')
uint32 = struct.Struct('!I')
uint64 = struct.Struct('!Q')

# NOTE(tori): keyed by width in bytes
uint_codecs = {
	uint8.size: uint8,
	uint16.size: uint16,
	uint32.size: uint32,
	uint64.size: uint64,
}

# NOTE(tori): pad and end are the only single-byte options; everything else
# carries a length byte, even when the length is zero
SENTINEL_TAGS = (OptionTag.PAD, OptionTag.END)


class Option:
	"""A single tag-length-value record from the DHCP options area.

	The length is never stored on its own: it is always the length of
	`data`, which every setter keeps within a single byte.
	"""
	HEADER = struct.Struct(
		'!'			# network byte order (big)
		'BB'		# tag, length
	)

	def __init__(self, tag, data=b''):
		self.tag = tag
		self.set_data(data)

	@property
	def tag(self):
		return lookup(OptionTag, self._tag)

	@tag.setter
	def tag(self, value):
		if value not in range(0x100):
			raise EncodeError('`%r` not in range(0x100)' % value)
		if value in SENTINEL_TAGS and getattr(self, '_data', b''):
			raise EncodeError('%r option cannot carry data'
				% lookup(OptionTag, value))
		self._tag = int(value)

	@property
	def data(self):
		return self._data

	@data.setter
	def data(self, value):
		self.set_data(value)

	@property
	def length(self):
		return len(self._data)

	@property
	def is_sentinel(self):
		return self._tag in SENTINEL_TAGS

	@property
	def size(self):
		"""Number of bytes this option takes up on the wire."""
		if self.is_sentinel:
			return 1
		return self.HEADER.size + len(self._data)

	def set_data(self, data):
		data = bytes(data)
		if len(data) > MAX_DATA_LENGTH:
			raise EncodeError('option data too long (%d bytes): `%r`'
				% (len(data), data))
		# NOTE(tori): pad and end go out as a lone tag byte, so any data
		# would be read back as the next option
		if data and self._tag in SENTINEL_TAGS:
			raise EncodeError('%r option cannot carry data' % self.tag)
		self._data = data

	def set_data_str(self, value):
		self.set_data(value.encode('utf-8'))

	def set_data_uint(self, value, width):
		try:
			codec = uint_codecs[width]
		except KeyError:
			raise EncodeError('unsupported integer width: %r' % width) from None
		try:
			self.set_data(codec.pack(value))
		except struct.error as e:
			raise EncodeError('`%r` not in range(%#x)'
				% (value, 1 << 8*width)) from e

	def set_data_u8(self, value):
		self.set_data_uint(value, 1)

	def set_data_u16(self, value):
		self.set_data_uint(value, 2)

	def set_data_u32(self, value):
		self.set_data_uint(value, 4)

	def set_data_u64(self, value):
		self.set_data_uint(value, 8)

	def set_data_ips(self, values):
		try:
			encoded = b''.join(IPv4Address(value).packed for value in values)
		except ValueError as e:
			raise EncodeError('invalid IP list: %r' % (values,)) from e
		self.set_data(encoded)

	def value_as_string(self):
		"""Decode the data as UTF-8.

		Whether that makes sense depends on the tag; this does not check.
		"""
		try:
			return self._data.decode('utf-8')
		except UnicodeDecodeError as e:
			raise InvalidStringError('option %r is not valid UTF-8: %s'
				% (self.tag, e)) from e

	def value_as_int(self):
		try:
			codec = uint_codecs[len(self._data)]
		except KeyError:
			raise InvalidValueError('option %r has %d bytes, not an integer'
				% (self.tag, len(self._data))) from None
		value, = codec.unpack(self._data)
		return value

	def value_as_ip(self):
		if len(self._data) != 4:
			raise InvalidValueError('option %r has %d bytes, not an IP'
				% (self.tag, len(self._data)))
		return IPv4Address(self._data)

	def value_as_ips(self):
		if not self._data or len(self._data)%4 != 0:
			raise InvalidValueError('option %r has %d bytes, not an IP list'
				% (self.tag, len(self._data)))
		return [IPv4Address(self._data[i:i + 4])
			for i in range(0, len(self._data), 4)]

	@classmethod
	def from_string(cls, tag, value):
		self = cls(tag)
		self.set_data_str(value)
		return self

	@classmethod
	def from_int(cls, tag, value, width):
		self = cls(tag)
		self.set_data_uint(value, width)
		return self

	@classmethod
	def from_ips(cls, tag, values):
		self = cls(tag)
		self.set_data_ips(values)
		return self

	def encode(self):
		if self.is_sentinel:
			return bytes([self._tag])
		return self.HEADER.pack(self._tag, len(self._data)) + self._data

	def to_bytes(self):
		return self.encode()

	@classmethod
	def parse(cls, buffer):
		"""Parse the option at the start of buffer.

		Bytes past the end of the option are ignored; the caller advances by
		`size` to reach the next one. Raises TruncatedError when the buffer
		cannot hold the tag and length, or the data the length announces,
		and MalformedError when a pad or end option announces data.
		"""
		buffer = memoryview(buffer)
		if len(buffer) < cls.HEADER.size:
			raise TruncatedError('option', cls.HEADER.size, len(buffer))
		tag, length = cls.HEADER.unpack_from(buffer)
		if tag in SENTINEL_TAGS and length:
			raise MalformedError('%r option announces %d bytes of data'
				% (lookup(OptionTag, tag), length))
		end = cls.HEADER.size + length
		if len(buffer) < end:
			raise TruncatedError('option %r' % lookup(OptionTag, tag), end,
				len(buffer))
		return cls(tag, buffer[cls.HEADER.size:end])

	def __eq__(self, other):
		if not isinstance(other, Option):
			return NotImplemented
		return (self._tag, self._data) == (other._tag, other._data)

	def __repr__(self):
		return '{cls}(tag={tag!r}, data={data!r})'.format(
			cls=type(self).__name__,
			tag=self.tag,
			data=self.data
		)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
