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
from dataclasses import MISSING, fields
import io
import logging
from typing import Any

from lxml import etree as ET

from .exceptions import MalformedDocument, SerializationError
from .fields import XmlBinding, XmlKind
from .manifest import MPD
from .mpd_element import MpdElement
from .namespaces import XML_NAMESPACES
from .options import MpdCodecOptions

# maps an element to the namespaces declared on that element
NamespaceDeclarations = dict[Any, dict[str | None, str]]

class MpdSerializer:
    """
    Converts between MPD objects and XML, using the XmlBinding of each
    field. The output is plain lxml serialization, without any of the
    namespace prefix handling performed by the rewrite pass.
    """

    def __init__(self, options: MpdCodecOptions | None = None) -> None:
        if options is None:
            options = MpdCodecOptions()
        self.options = options
        if options.log is not None:
            self.log = options.log
        else:
            self.log = logging.getLogger(__name__)

    @staticmethod
    def tag_name(name: str, namespace: str | None) -> str:
        if namespace:
            return f'{{{namespace}}}{name}'
        return name

    @staticmethod
    def local_name(tag: str) -> str:
        return ET.QName(tag).localname

    def to_string(self, mpd: MPD) -> str:
        try:
            root = self.to_element(mpd)
            ET.indent(root, space=self.options.indent)
            return ET.tostring(root, encoding='unicode')
        except (AttributeError, TypeError, ValueError) as err:
            self.log.error('Failed to serialize %s: %s', mpd.classname(), err)
            raise SerializationError(f'Failed to serialize MPD: {err}') from err

    def to_element(self, mpd: MPD) -> ET.ElementBase:
        namespace = mpd.xmlns if mpd.xmlns else None
        nsmap = {None: namespace} if namespace else None
        root = ET.Element(self.tag_name(mpd.TAG, namespace), nsmap=nsmap)
        markers = {prefix: XML_NAMESPACES[prefix]
                   for prefix in sorted(self.undeclared_prefixes(mpd))}
        if markers:
            self.log.debug('Declaring namespaces %s on the %s element',
                           ', '.join(markers.keys()), mpd.TAG)
        self.encode_fields(root, mpd, namespace, markers)
        return root

    @staticmethod
    def declared_prefixes(item: MpdElement) -> set[str]:
        return {binding.name for name, binding in item.xml_bindings()
                if binding.kind == XmlKind.NAMESPACE and binding.name is not None
                and getattr(item, name) is not None}

    def undeclared_prefixes(self, item: MpdElement,
                            in_scope: frozenset[str] = frozenset()) -> set[str]:
        """
        Finds the namespace prefixes used by item and its descendants that
        are not declared by a namespace marker on an enclosing element
        """
        in_scope = in_scope | self.declared_prefixes(item)
        missing: set[str] = set()
        for name, binding in item.xml_bindings():
            value = getattr(item, name)
            if value is None:
                continue
            if binding.kind == XmlKind.ATTRIBUTE:
                if binding.prefix is not None and binding.prefix not in in_scope:
                    missing.add(binding.prefix)
            elif binding.kind == XmlKind.ELEMENT and binding.clazz is not str:
                children = value if binding.repeated else [value]
                for child in children:
                    if (binding.prefix is not None and
                            binding.prefix not in in_scope and
                            binding.prefix not in self.declared_prefixes(child)):
                        missing.add(binding.prefix)
                    missing |= self.undeclared_prefixes(child, in_scope)
        return missing

    def encode_fields(self, elt: ET.ElementBase, item: MpdElement,
                      namespace: str | None,
                      markers: dict[str, str] | None = None) -> None:
        for name, binding in item.xml_bindings():
            value = getattr(item, name)
            if binding.kind == XmlKind.ATTRIBUTE:
                if value is None:
                    if not binding.required:
                        continue
                    value = binding.value_type.empty
                text = binding.value_type.to_text(value)
                if text is not None:
                    elt.set(binding.name, text)
            elif binding.kind == XmlKind.NAMESPACE:
                if value is None and markers:
                    value = markers.get(binding.name)
                # the default namespace is written using the element's nsmap
                if value is not None and binding.name is not None:
                    elt.set(binding.name, value)
            elif binding.kind == XmlKind.TEXT:
                if value is not None:
                    elt.text = value
            else:
                self.encode_children(elt, binding, value, namespace)

    def encode_children(self, elt: ET.ElementBase, binding: XmlBinding,
                        value: Any, namespace: str | None) -> None:
        tag = self.tag_name(binding.name, namespace)
        if binding.repeated:
            for child in value:
                self.encode_fields(ET.SubElement(elt, tag), child, namespace)
        elif binding.clazz is str:
            if value is None or (value == '' and binding.omit_empty):
                return
            ET.SubElement(elt, tag).text = value
        elif value is not None:
            self.encode_fields(ET.SubElement(elt, tag), value, namespace)

    def from_bytes(self, data: bytes | str, mpd: MPD | None = None) -> MPD:
        """
        Parses an MPD document. If mpd is provided, its contents are
        replaced by the parsed values.
        """
        if isinstance(data, str):
            data = data.encode('utf-8')
        root, declarations = self.parse(data)
        if self.local_name(root.tag) != MPD.TAG:
            raise MalformedDocument(
                f'Expected root element "{MPD.TAG}", found "{self.local_name(root.tag)}"')
        values = self.decode_fields(root, MPD, declarations)
        if mpd is None:
            mpd = MPD(**values)
        else:
            for fld in fields(mpd):
                if fld.name in values:
                    setattr(mpd, fld.name, values[fld.name])
                elif fld.default_factory is not MISSING:
                    setattr(mpd, fld.name, fld.default_factory())
                else:
                    setattr(mpd, fld.name, fld.default)
        self.log.debug('Parsed MPD with %d periods', len(mpd.periods))
        return mpd

    def parse(self, data: bytes) -> tuple[ET.ElementBase, NamespaceDeclarations]:
        """
        Parses the XML, recording which namespaces are declared on
        each element
        """
        declarations: NamespaceDeclarations = {}
        pending: dict[str | None, str] = {}
        root = None
        try:
            for event, item in ET.iterparse(
                    io.BytesIO(data), events=('start-ns', 'start'),
                    resolve_entities=False, no_network=True):
                if event == 'start-ns':
                    prefix, uri = item
                    pending[prefix or None] = uri
                    continue
                if root is None:
                    root = item
                if pending:
                    declarations[item] = pending
                    pending = {}
        except ET.XMLSyntaxError as err:
            self.log.warning('Failed to parse MPD: %s', err)
            raise MalformedDocument('Failed to parse MPD', err) from err
        if root is None:
            raise MalformedDocument('MPD document has no root element')
        return (root, declarations,)

    def decode_element(self, elt: ET.ElementBase, clazz: type[MpdElement],
                       declarations: NamespaceDeclarations) -> MpdElement:
        return clazz(**self.decode_fields(elt, clazz, declarations))

    def decode_fields(self, elt: ET.ElementBase, clazz: type[MpdElement],
                      declarations: NamespaceDeclarations) -> dict[str, Any]:
        attributes = {self.local_name(k): v for k, v in elt.attrib.items()}
        local_ns = declarations.get(elt, {})
        children = [ch for ch in elt if isinstance(ch.tag, str)]
        values: dict[str, Any] = {}
        for name, binding in clazz.xml_bindings():
            if binding.kind == XmlKind.ATTRIBUTE:
                text = attributes.get(binding.name)
                if text is None:
                    continue
                try:
                    values[name] = binding.value_type.from_text(text, binding.name)
                except ValueError as err:
                    msg = (f'Attribute "{clazz.__name__}@{binding.name}" has invalid '
                           f'{binding.value_type.name} value "{text}"')
                    self.log.warning('%s: %s', msg, err)
                    raise MalformedDocument(msg, err) from err
            elif binding.kind == XmlKind.NAMESPACE:
                if binding.name is not None and binding.name in attributes:
                    values[name] = attributes[binding.name]
                elif binding.name in local_ns:
                    values[name] = local_ns[binding.name]
            elif binding.kind == XmlKind.TEXT:
                if elt.text is not None:
                    values[name] = elt.text
            else:
                matches = [ch for ch in children
                           if self.local_name(ch.tag) == binding.name]
                if not matches:
                    continue
                if binding.repeated:
                    values[name] = [
                        self.decode_element(ch, binding.clazz.clazz, declarations)
                        for ch in matches]
                elif binding.clazz is str:
                    values[name] = matches[0].text or ''
                else:
                    values[name] = self.decode_element(
                        matches[0], binding.clazz, declarations)
        return values
