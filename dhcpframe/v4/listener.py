# SPDX-License-Identifier: MIT

__all__ = ['listen', 'Listener', 'configure_logging', 'build_parser', 'main']

import argparse
import logging
import socket
from sys import stderr

from .frame import decode
from ..error import DHCPv4Error

DHCP_ADDRESS = '0.0.0.0'
DHCP_TYPE = socket.SOCK_DGRAM

DHCP_SERVER_PORT = 67

# NOTE(tori): a full ethernet payload; frames are 576 bytes unless the client
# announces a larger maximum message size
BUFFER_SIZE = 1500


def listen(address=DHCP_ADDRESS, port=DHCP_SERVER_PORT, timeout=5):
	sock = socket.socket(socket.AF_INET, DHCP_TYPE)
	try:
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
		sock.bind((address, port))
		sock.settimeout(timeout)
	except OSError:
		sock.close()
		raise
	return sock


class Listener:
	"""Receive datagrams and decode each as a DHCP frame.

	Frames that fail to decode are logged and dropped; one bad datagram never
	stops the loop. Decoded frames go to handler(frame, address), if given.
	"""

	def __init__(self, logger, sock, buffer_size=BUFFER_SIZE, handler=None):
		self.logger = logger
		self.socket = sock
		self.buffer_size = buffer_size
		self.handler = handler
		self.running = False

	def handle_datagram(self, data, address):
		try:
			frame = decode(data)
			message_type = frame.message_type
		except DHCPv4Error as e:
			self.logger.error('%s:%d - could not decode frame (caused by %s)',
				*address, e)
			return None

		if message_type is None:
			message_type = 'BOOTP'
		if frame.hlen == 6:
			client = frame.client_mac_string()
		else:
			client = frame.hardware_address.hex()
		self.logger.info('%s:%d - received %s from %s (xid %#010x, %d options)',
			*address, getattr(message_type, 'name', message_type), client,
			frame.xid, len(frame.options))

		if self.handler is not None:
			try:
				self.handler(frame, address)
			except Exception as e:
				self.logger.error('%s:%d - could not handle frame (caused by %r)',
					*address, e)
		return frame

	def handle_client(self):
		try:
			data, address = self.socket.recvfrom(self.buffer_size)
		except socket.timeout:
			return None
		return self.handle_datagram(data, address)

	def serve_forever(self):
		self.running = True
		while self.running:
			self.handle_client()

	def stop(self):
		self.running = False


def configure_logging(output='-', level='INFO'):
	if isinstance(output, str):
		if output == '-':
			log_handler = logging.StreamHandler(stderr)
		else:
			log_handler = logging.FileHandler(output)
	else:
		log_handler = logging.StreamHandler(output)

	log_format = '{asctime}|{name}|{levelname}|{message}'
	log_formatter = logging.Formatter(log_format, style='{')
	log_handler.setFormatter(log_formatter)

	# NOTE(tori): the package logger, so the codec's own debug messages end up
	# in the same place as the listener's
	logger = logging.getLogger(__name__.split('.')[0])
	logger.addHandler(log_handler)
	logger.setLevel(level)

	return logger


def build_parser():
	parser = argparse.ArgumentParser(
		description='listen for DHCP frames and log what they contain')
	parser.add_argument('-a', '--address', default=DHCP_ADDRESS,
		help='address on which to bind (default: %(default)s)')
	parser.add_argument('-p', '--port', default=DHCP_SERVER_PORT, type=int,
		help='UDP port on which to bind (default: %(default)s)')
	parser.add_argument('-b', '--buffer-size', default=BUFFER_SIZE, type=int,
		help='bytes read per datagram (default: %(default)s)')
	parser.add_argument('-f', '--log-file', default='-',
		help='location to log messages, - for stderr')
	parser.add_argument('-l', '--log-level', default='INFO', choices=('ALL',
		'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'), type=str.upper,
		help='verbosity of log messages, in descending order')
	return parser


def main(argv=None):
	args = build_parser().parse_args(argv)

	level = 0 if args.log_level == 'ALL' else getattr(logging, args.log_level)
	logger = configure_logging(output=args.log_file, level=level)

	try:
		sock = listen(args.address, args.port)
	except OSError as e:
		logger.error('could not bind %s:%d (caused by %r)', args.address,
			args.port, e)
		return 1

	logger.info('listening on %s:%d', args.address, args.port)
	listener = Listener(logger, sock, buffer_size=args.buffer_size)
	with sock:
		try:
			listener.serve_forever()
		except KeyboardInterrupt:
			logger.info('interrupted, shutting down')
	return 0


if __name__ == '__main__':
	raise SystemExit(main())

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
