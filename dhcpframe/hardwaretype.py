# SPDX-License-Identifier: MIT

import enum

# NOTE(tori): hardware types come from the following:
# https://www.iana.org/assignments/arp-parameters/arp-parameters.xhtml

@enum.unique
class HardwareType(enum.IntEnum):
	RESERVED = 0
	ETH10MB = 1
	EXPERIMENTAL_ETHERNET = 2
	AX25 = 3
	PROTEON_PRONET_TOKEN_RING = 4
	CHAOS = 5
	IEEE802 = 6
	ARCNET = 7
	LOCALTALK = 11
	FRAME_RELAY = 15
	ATM = 16
	HDLC = 17
	FIBRE_CHANNEL = 18
	SERIAL_LINE = 20
	IEEE_1394 = 24
	EUI64 = 27
	IPSEC_TUNNEL = 31
	INFINIBAND = 32

# NOTE(tori): only types with a fixed, well-known address length are listed;
# chaddr holds at most 16 bytes, so infiniband clients send a client
# identifier instead of a usable hardware address
ADDRESS_LENGTHS = {
	HardwareType.ETH10MB: 6,
	HardwareType.EXPERIMENTAL_ETHERNET: 6,
	HardwareType.IEEE802: 6,
	HardwareType.ARCNET: 1,
	HardwareType.IEEE_1394: 8,
	HardwareType.EUI64: 8,
	HardwareType.INFINIBAND: 0,
}

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
