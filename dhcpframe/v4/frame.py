# SPDX-License-Identifier: MIT

__all__ = ['BOOTP', 'Frame', 'DHCP_MAGIC_COOKIE', 'decode', 'encode']

import logging
import struct
from collections import namedtuple
from ipaddress import IPv4Address
from random import randrange

from ..hardwaretype import HardwareType, ADDRESS_LENGTHS
from ..error import (MalformedError, TruncatedError, BadMagicCookieError,
	OptionDecodeError, InvalidValueError, EncodeError)
from .optiontags import Operation, Flags, MessageType, OptionTag, lookup
from .option import Option

logger = logging.getLogger(__name__)

DHCP_MAGIC_COOKIE = b'\x63\x82\x53\x63'


def unsigned_field(name, bits):
	def getter(self):
		return self.raw_data[name]

	def setter(self, value):
		if value not in range(1 << bits):
			raise EncodeError('%s: `%r` not in range(%#x)'
				% (name, value, 1 << bits))
		self.raw_data[name] = int(value)

	return property(getter, setter)


def fixed_width_field(name, width):
	def getter(self):
		return self.raw_data[name]

	def setter(self, value):
		value = bytes(value)
		if len(value) != width:
			raise EncodeError('%s must be exactly %d bytes: `%r`'
				% (name, width, value))
		self.raw_data[name] = value

	return property(getter, setter)


def address_view(name):
	def getter(self):
		return IPv4Address(self.raw_data[name])

	def setter(self, value):
		try:
			self.raw_data[name] = IPv4Address(value).packed
		except ValueError as e:
			raise EncodeError('%s: invalid IP `%r`' % (name, value)) from e

	return property(getter, setter)


def padded_string_view(name, width):
	def getter(self):
		return self.raw_data[name].rstrip(b'\0')

	def setter(self, value):
		if isinstance(value, str):
			value = value.encode('utf-8')
		value = bytes(value)
		if len(value) > width:
			raise EncodeError('encoded %s too long: `%r`' % (name, value))
		self.raw_data[name] = value.ljust(width, b'\0')

	return property(getter, setter)


class BOOTP:
	"""The fixed 236-byte BOOTP header, without any vendor area."""
	NAMES = namedtuple('Fields', 'op htype hlen hops xid secs flags ciaddr'
		' yiaddr siaddr giaddr chaddr sname file', defaults=(None,)*14)
	CODEC = struct.Struct(
		'!'			# network byte order (big)
		'BBBB'		# op, htype, hlen, hops
		'I'			# xid
		'HH'		# secs, flags
		'4s'		# ciaddr (client ip)
		'4s'		# yiaddr (given ip by server)
		'4s'		# siaddr (server ip address)
		'4s'		# giaddr (gateway ip address)
		'16s'		# chaddr (client hardware address)
		'64s'		# server host name (null-terminated)
		'128s'		# boot file name (null-terminated)
	)

	op = unsigned_field('op', 8)
	htype = unsigned_field('htype', 8)
	hlen = unsigned_field('hlen', 8)
	hops = unsigned_field('hops', 8)
	xid = unsigned_field('xid', 32)
	secs = unsigned_field('secs', 16)
	flags = unsigned_field('flags', 16)

	ciaddr = fixed_width_field('ciaddr', 4)
	yiaddr = fixed_width_field('yiaddr', 4)
	siaddr = fixed_width_field('siaddr', 4)
	giaddr = fixed_width_field('giaddr', 4)
	chaddr = fixed_width_field('chaddr', 16)
	sname = fixed_width_field('sname', 64)
	file = fixed_width_field('file', 128)

	client_ip = address_view('ciaddr')
	your_ip = address_view('yiaddr')
	server_ip = address_view('siaddr')
	gateway_ip = address_view('giaddr')

	server_name = padded_string_view('sname', 64)
	boot_file_name = padded_string_view('file', 128)

	@property
	def operation(self):
		return lookup(Operation, self.op)

	@operation.setter
	def operation(self, value):
		self.op = value

	@property
	def hardware_type(self):
		return lookup(HardwareType, self.htype)

	@hardware_type.setter
	def hardware_type(self, value):
		self.htype = value

	@property
	def hardware_address(self):
		return self.chaddr[:self.hlen]

	@hardware_address.setter
	def hardware_address(self, value):
		value = bytes(value)
		if len(value) > 16:
			raise EncodeError('hardware address too long: `%r`' % value)
		self.chaddr = value.ljust(16, b'\0')
		self.hlen = len(value)

	@property
	def broadcast(self):
		return bool(self.flags & Flags.BROADCAST)

	@broadcast.setter
	def broadcast(self, value):
		if value:
			self.flags |= Flags.BROADCAST
		else:
			self.flags &= ~int(Flags.BROADCAST) & 0xFFFF

	def __init__(self, *, op, htype=HardwareType.ETH10MB, hops=0, xid=None,
		secs=0, flags=0, ciaddr=0, yiaddr=0, siaddr=0, giaddr=0, hwaddr=None,
		sname=b'', file=b''):
		self.raw_data = self.NAMES()._asdict()
		self.op = op
		self.htype = htype
		self.hops = hops
		if xid is None:
			xid = randrange(0x100000000)
		self.xid = xid
		self.secs = secs
		self.flags = flags
		self.client_ip = ciaddr
		self.your_ip = yiaddr
		self.server_ip = siaddr
		self.gateway_ip = giaddr
		if hwaddr is None:
			hwaddr = bytes(ADDRESS_LENGTHS.get(htype, 6))
		self.hardware_address = hwaddr
		self.server_name = sname
		self.boot_file_name = file

	def client_mac_string(self):
		"""Format the hardware address as ``xx:xx:xx:xx:xx:xx``.

		Only meaningful for 6-byte (ethernet) hardware addresses; any other
		hlen raises InvalidValueError.
		"""
		if self.hlen != 6:
			raise InvalidValueError('hardware address length is %d, not a MAC'
				% self.hlen)
		return ':'.join('%02x' % octet for octet in self.chaddr[:6])

	def _repr_parts(self):
		return (
			'operation={op!r}'.format(op=self.operation),
			'hardware_type={htype!r}'.format(htype=self.hardware_type),
			'hardware_address={hwaddr}'.format(hwaddr=self.hardware_address),
			'hops={hops}'.format(hops=hex(self.hops)),
			'transaction_id={xid}'.format(xid=hex(self.xid)),
			'seconds={secs}'.format(secs=self.secs),
			'flags={flags}'.format(flags=hex(self.flags)),
			'client_ip={ciaddr}'.format(ciaddr=self.client_ip),
			'your_ip={yiaddr}'.format(yiaddr=self.your_ip),
			'server_ip={siaddr}'.format(siaddr=self.server_ip),
			'gateway_ip={giaddr}'.format(giaddr=self.gateway_ip),
			'server_name={sname!r}'.format(sname=self.server_name),
			'boot_file_name={file!r}'.format(file=self.boot_file_name)
		)

	def __repr__(self):
		return '{cls}({parts})'.format(
			cls=type(self).__name__,
			parts=','.join(self._repr_parts())
		)

	def __eq__(self, other):
		if type(other) is not type(self):
			return NotImplemented
		return self.raw_data == other.raw_data

	def encode(self):
		ordered_data = [self.raw_data[field] for field in self.NAMES._fields]
		return self.CODEC.pack(*ordered_data)

	def to_bytes(self):
		return self.encode()

	@classmethod
	def decode(cls, packet):
		packet = bytes(packet)
		if len(packet) < cls.CODEC.size:
			raise TruncatedError('frame', cls.CODEC.size, len(packet))
		self = cls(op=Operation.REQUEST, xid=0)
		data = cls.CODEC.unpack_from(packet)
		structured_data = cls.NAMES._make(data)
		self.raw_data = structured_data._asdict()
		return self


class Frame(BOOTP):
	"""A BOOTP header followed by the DHCP magic cookie and options.

	Options keep the order they were added or received in. Nothing is
	deduplicated; lookups by tag return the first occurrence.
	"""

	def __init__(self, *, options=(), **fields):
		super().__init__(**fields)
		self.options = []
		for option in options:
			self.add_option(option)

	@classmethod
	def new(cls, op, xid):
		return cls(op=op, xid=xid)

	def add_option(self, option):
		if not isinstance(option, Option):
			raise TypeError('%r is not an Option' % option)
		self.options.append(option)

	def add_end_option(self):
		self.add_option(Option(OptionTag.END))

	def get_options(self, tag):
		return [option for option in self.options if option.tag == tag]

	def get_option(self, tag):
		for option in self.options:
			if option.tag == tag:
				return option
		return None

	@property
	def message_type(self):
		option = self.get_option(OptionTag.MESSAGE_TYPE)
		if option is None:
			return None
		return lookup(MessageType, option.value_as_int())

	def _repr_parts(self):
		return (
			*super()._repr_parts(),
			'options={options!r}'.format(options=self.options)
		)

	def __eq__(self, other):
		if type(other) is not type(self):
			return NotImplemented
		return (self.raw_data == other.raw_data
			and self.options == other.options)

	def encode(self):
		return b''.join([
			super().encode(),
			DHCP_MAGIC_COOKIE,
			*(option.encode() for option in self.options)
		])

	@staticmethod
	def decode_options(raw_data, offset=0):
		"""Decode the option stream of raw_data starting at offset.

		Stops at an end option or at the end of raw_data, whichever comes
		first. Pad bytes are skipped. Offsets in errors are relative to the
		start of raw_data.
		"""
		raw_data = memoryview(raw_data)
		options = []
		cursor = offset

		while cursor < len(raw_data):
			tag = raw_data[cursor]
			if tag == OptionTag.END:
				if any(raw_data[cursor + 1:]):
					logger.debug('ignoring %d bytes after end option',
						len(raw_data) - cursor - 1)
				break
			if tag == OptionTag.PAD:
				cursor += 1
				continue

			try:
				option = Option.parse(raw_data[cursor:])
			except MalformedError as e:
				raise OptionDecodeError(cursor, e) from e
			options.append(option)
			cursor += Option.HEADER.size + option.length
		else:
			logger.debug('option stream has no end option')

		return options

	@classmethod
	def decode(cls, packet):
		packet = bytes(packet)
		self = super().decode(packet)

		options_offset = cls.CODEC.size + len(DHCP_MAGIC_COOKIE)
		if len(packet) == cls.CODEC.size:
			# NOTE(tori): bare BOOTP header, there is nothing to check the
			# cookie against
			logger.debug('frame has no vendor area, no options decoded')
			return self

		cookie = packet[cls.CODEC.size:options_offset]
		if cookie != DHCP_MAGIC_COOKIE:
			raise BadMagicCookieError(cookie)

		self.options = cls.decode_options(packet, options_offset)
		return self


def decode(packet):
	return Frame.decode(packet)


def encode(frame):
	return frame.encode()

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
