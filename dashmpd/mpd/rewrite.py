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
"""
Line based rewriting of serialized manifests.

The generic serializer has no way to put a namespace prefix on one
nested element, so the cenc and mspr namespaces are written as bare
attributes (e.g. cenc="urn:mpeg:cenc:2013") and converted here into
namespace declarations and prefixed names.

Only tags are rewritten. The serializer escapes "<" and ">" in text and
attribute values, so every "<...>" in its output is markup.
"""
from collections.abc import Iterator
import re

EMPTY_ELEMENT_RE = re.compile(r'<([A-Za-z_][\w.:-]*)((?:\s[^<>]*?)?)></\1>')

TAG_RE = re.compile(
    r'<(?P<close>/?)(?P<name>[A-Za-z_][\w.:-]*)(?P<attrs>(?:\s[^<>]*?)?)(?P<empty>/?)>')

EMPTY_TIMELINE = '<SegmentTimeline/>'

# (bare name, prefixed name) of each renamed element that has not yet
# been closed
PendingClose = list[tuple[str, str]]

class PrefixRule:
    """
    Rewrites one start tag, selected either by its element name or by
    one of its attributes. Only bare (unprefixed) names are matched, so a
    tag that has already been rewritten is left unchanged.
    """
    __slots__ = ('prefix', 'declarations', 'element', 'attribute')

    def __init__(self, declarations: tuple[str, ...],
                 prefix: str | None = None,
                 element: str | None = None,
                 attribute: str | None = None) -> None:
        self.prefix = prefix
        self.declarations = [
            (re.compile(rf'(?<=\s){name}="'), f'xmlns:{name}="')
            for name in declarations]
        self.element = element
        self.attribute = None
        if attribute is not None:
            self.attribute = (
                re.compile(rf'(?<=\s){attribute}="'), f'{prefix}:{attribute}="')

    def matches(self, name: str, attrs: str) -> bool:
        if self.element is not None:
            return name == self.element
        return self.attribute[0].search(attrs) is not None

    def apply(self, name: str, attrs: str) -> tuple[str, str]:
        for pattern, replacement in self.declarations:
            attrs = pattern.sub(replacement, attrs, count=1)
        if self.attribute is not None:
            pattern, replacement = self.attribute
            attrs = pattern.sub(replacement, attrs, count=1)
        elif self.prefix is not None:
            name = f'{self.prefix}:{name}'
        return (name, attrs,)


PREFIX_RULES = (
    PrefixRule(('cenc', 'mspr'), element='MPD'),
    PrefixRule(('cenc',), prefix='cenc', element='pssh'),
    PrefixRule(('mspr',), prefix='mspr', element='pro'),
    PrefixRule(('cenc',), prefix='cenc', attribute='default_KID'),
)


def iter_lines(text: str) -> Iterator[str]:
    """
    Splits text at newline characters, keeping the newline on each line
    """
    start = 0
    while start < len(text):
        end = text.find('\n', start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end + 1]
        start = end + 1


def rewrite_tag(match: re.Match, pending: PendingClose) -> str:
    name = match['name']
    if match['close']:
        if pending and pending[-1][0] == name:
            return f'</{pending.pop()[1]}{match["attrs"]}>'
        return match[0]
    attrs = match['attrs']
    new_name = name
    for rule in PREFIX_RULES:
        if rule.matches(new_name, attrs):
            new_name, attrs = rule.apply(new_name, attrs)
    if new_name != name and not match['empty']:
        pending.append((name, new_name,))
    return f'<{new_name}{attrs}{match["empty"]}>'


def rewrite_line(line: str, pending: PendingClose | None = None) -> str:
    """
    Rewrites one line. The closing tag of a renamed element can be on a
    later line, so pending carries the renamed elements that are still
    open from one line to the next.
    """
    if pending is None:
        pending = []
    line = EMPTY_ELEMENT_RE.sub(r'<\1\2/>', line)
    line = TAG_RE.sub(lambda match: rewrite_tag(match, pending), line)
    if line.strip() == EMPTY_TIMELINE:
        return ''
    return line


def rewrite_manifest(text: str) -> str:
    """
    Applies the self-closing, namespace prefix and empty SegmentTimeline
    rules to every line of a serialized manifest
    """
    pending: PendingClose = []
    return ''.join(rewrite_line(line, pending) for line in iter_lines(text))
