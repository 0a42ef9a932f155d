"""dhcpframe.v4

Encoding and decoding of IPv4 BOOTP/DHCP frames

"""

# SPDX-License-Identifier: MIT
__license__ = 'MIT'

from .frame import *
from .frame import __all__ as frame_all
from .option import *
from .option import __all__ as option_all
from .optiontags import *
from .optiontags import __all__ as optiontags_all
from ..hardwaretype import HardwareType

__all__ = [
	*frame_all,
	*option_all,
	*optiontags_all,
	'HardwareType'
]

# NOTE(tori): rfc951 - header layout
# NOTE(tori): rfc2131 - magic cookie, flags
# NOTE(tori): rfc2132 - option tlv encoding, pad and end
# XXX(tori): rfc3396 - long options are not concatenated, every occurrence is
# kept as its own Option and callers pick

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
