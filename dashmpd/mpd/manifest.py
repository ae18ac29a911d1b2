#############################################################################
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
#############################################################################
#
#  Project Name        :    MPEG DASH manifest codec
#
#  Author              :    Alex Ashley
#
#############################################################################
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from dashmpd.utils.list_of import ListOf

from .fields import xml_attribute, xml_element, xml_namespace
from .mpd_element import MpdElement
from .period import Period

if TYPE_CHECKING:
    from .options import MpdCodecOptions

@dataclass(slots=True, kw_only=True)
class MPD(MpdElement):
    """
    The root element of a DASH manifest.

    The "cenc" and "mspr" fields hold the URIs of the Common Encryption
    and PlayReady namespaces. When set, they are declared on the MPD
    element of the encoded document.
    """
    TAG = 'MPD'

    xmlns: str | None = xml_namespace(None)
    cenc: str | None = xml_namespace('cenc')
    mspr: str | None = xml_namespace('mspr')
    type: str | None = xml_attribute('type')
    minimumUpdatePeriod: str | None = xml_attribute('minimumUpdatePeriod')
    availabilityStartTime: str | None = xml_attribute('availabilityStartTime')
    mediaPresentationDuration: str | None = xml_attribute('mediaPresentationDuration')
    minBufferTime: str | None = xml_attribute('minBufferTime')
    suggestedPresentationDelay: str | None = xml_attribute('suggestedPresentationDelay')
    timeShiftBufferDepth: str | None = xml_attribute('timeShiftBufferDepth')
    publishTime: str | None = xml_attribute('publishTime')
    profiles: str = xml_attribute('profiles', required=True)
    BaseURL: str = xml_element('BaseURL', str)
    periods: list[Period] = xml_element('Period', ListOf(Period))

    def encode(self, options: Union["MpdCodecOptions", None] = None) -> bytes:
        """
        Generates the XML document for this manifest
        """
        from .codec import encode
        return encode(self, options)

    def decode(self, data: bytes | str,
               options: Union["MpdCodecOptions", None] = None) -> "MPD":
        """
        Replaces the contents of this manifest with the parsed document
        """
        from .codec import decode
        return decode(data, mpd=self, options=options)
