#############################################################################
#
#  Project Name        :    MPEG DASH manifest codec
#
#  Author              :    Alex Ashley
#
#############################################################################
from dataclasses import dataclass
from logging import Logger

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

@dataclass(slots=True, kw_only=True)
class MpdCodecOptions:
    """
    Options that can be passed to the MPD encoder and decoder
    """
    indent: str = '  '
    xml_declaration: str = XML_DECLARATION
    rewrite: bool = True
    log: Logger | None = None
