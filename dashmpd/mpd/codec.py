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
from .manifest import MPD
from .options import MpdCodecOptions
from .rewrite import rewrite_manifest
from .serializer import MpdSerializer

def encode(mpd: MPD, options: MpdCodecOptions | None = None) -> bytes:
    """
    Generates the XML for an MPD. Empty elements are self-closed, the
    cenc and mspr namespace prefixes are added and empty SegmentTimeline
    elements are removed.
    """
    serializer = MpdSerializer(options)
    text = serializer.to_string(mpd)
    if serializer.options.rewrite:
        text = rewrite_manifest(text)
    result = ''.join([serializer.options.xml_declaration, '\n', text, '\n'])
    serializer.log.debug('Generated MPD of %d characters', len(result))
    return result.encode('utf-8')


def decode(data: bytes | str, mpd: MPD | None = None,
           options: MpdCodecOptions | None = None) -> MPD:
    """
    Parses an MPD document. If mpd is provided it is populated in place,
    otherwise a new MPD is returned.
    """
    serializer = MpdSerializer(options)
    return serializer.from_bytes(data, mpd)
