# SPDX-License-Identifier: MIT

import pytest

MAGIC_COOKIE = bytes([0x63, 0x82, 0x53, 0x63])

VENDOR_CLASS = b'PXEClient:Arch:00000:UNDI:002001'


def make_header(op=0x01, xid=0x6e86444c, secs=8,
	chaddr=b'\x52\x54\x01\x12\x34\x56'):
	return b''.join([
		bytes([op, 0x01, 0x06, 0x00]),
		xid.to_bytes(4, 'big'),
		secs.to_bytes(2, 'big'),
		b'\x00\x00',			# flags
		b'\x00'*16,				# ciaddr, yiaddr, siaddr, giaddr
		chaddr.ljust(16, b'\x00'),
		b'\x00'*64,				# sname
		b'\x00'*128,			# file
	])


@pytest.fixture
def header():
	return make_header()


@pytest.fixture
def discover(header):
	"""A PXE client's DHCPDISCOVER, with trailing padding after the end."""
	return b''.join([
		header,
		MAGIC_COOKIE,
		b'\x35\x01\x01',								# message type
		b'\x3c' + bytes([len(VENDOR_CLASS)]) + VENDOR_CLASS,
		b'\x37\x04\x01\x03\x06\x0f',					# parameter requests
		b'\xff',
		b'\x00'*8,
	])

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
