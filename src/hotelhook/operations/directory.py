"""Phone directory use case."""

import logging
from collections.abc import Mapping
from typing import Any

from hotelhook.core.models import Contact
from hotelhook.operations.arguments import DirectoryArguments, parse_arguments
from hotelhook.operations.base import Operation
from hotelhook.services.directory import PhoneDirectoryService, format_area_name, resolve_area

logger = logging.getLogger(__name__)


def _contact_block(contact: Contact, indent: str = "") -> str:
    return (
        f"{indent}👤 {contact.name} - {contact.position}\n"
        f"{indent}   📞 Teléfono: {contact.phone} (Ext. {contact.extension})\n"
        f"{indent}   📧 Email: {contact.email}\n"
        f"{indent}   ⏰ Horario: {contact.schedule}\n"
    )


class GetPhoneDirectoryOperation(Operation):
    """Answers phone directory questions.

    Precedence when several arguments are given: ``all``, then
    ``extension``, then ``name``, then ``area``. With none of them, the
    available areas are listed.
    """

    name = "Consultar Directorio Telefónico"

    def __init__(self, directory: PhoneDirectoryService):
        self.directory = directory

    def execute(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments(DirectoryArguments, arguments)
        logger.info(
            "directory.query: area=%s name=%s extension=%s all=%s",
            args.area,
            args.name,
            args.extension,
            args.all,
        )

        if args.all:
            return self._full_directory()
        if args.extension:
            return self._by_extension(args.extension)
        if args.name:
            return self._by_name(args.name)
        if args.area:
            return self._by_area(args.area)
        return self._help()

    def _full_directory(self) -> str:
        directory = self.directory.get_all_directory()
        parts = ["📞 Directorio Telefónico Completo del Hotel\n\n"]
        for area, contacts in directory.items():
            parts.append(f"📍 {format_area_name(area)}:\n")
            parts.extend(_contact_block(c, indent="   ") + "\n" for c in contacts)
        return "".join(parts)

    def _by_extension(self, extension: str) -> str:
        contact = self.directory.get_contact_by_extension(extension)
        if contact is None:
            return f'No se encontró contacto con extensión "{extension}"'

        return (
            "📞 Contacto encontrado:\n\n"
            f"📍 Área: {format_area_name(contact.area)}\n"
            f"👤 Nombre: {contact.name}\n"
            f"💼 Cargo: {contact.position}\n"
            f"📞 Teléfono: {contact.phone}\n"
            f"🔢 Extensión: {contact.extension}\n"
            f"📧 Email: {contact.email}\n"
            f"⏰ Horario: {contact.schedule}"
        )

    def _by_name(self, name: str) -> str:
        contacts = self.directory.search_contact_by_name(name)
        if not contacts:
            return f'No se encontraron contactos con el nombre "{name}"'

        parts = [f"📞 Contactos encontrados ({len(contacts)}):\n\n"]
        for contact in contacts:
            parts.append(f"📍 {format_area_name(contact.area)}:\n")
            parts.append(_contact_block(contact, indent="   ") + "\n")
        return "".join(parts)

    def _by_area(self, area: str) -> str:
        contacts = self.directory.get_directory_by_area(area)
        if not contacts:
            available = ", ".join(self.directory.get_available_areas())
            return (
                f'Área "{area}" no encontrada en el directorio'
                f"\n\nÁreas disponibles: {available}"
            )

        parts = [f"📞 Directorio - {format_area_name(resolve_area(area))}\n\n"]
        parts.extend(_contact_block(c) + "\n" for c in contacts)
        return "".join(parts)

    def _help(self) -> str:
        areas = "".join(
            f"   - {format_area_name(a)}\n" for a in self.directory.get_available_areas()
        )
        return (
            "📞 Directorio Telefónico del Hotel\n\n"
            "Para consultar contactos, puedes especificar:\n"
            "- Un área específica (ej: recepción, piscina, cocina)\n"
            "- Un nombre de contacto\n"
            "- Una extensión telefónica\n"
            '- "all: true" para ver todo el directorio\n\n'
            "📍 Áreas disponibles:\n"
            f"{areas}"
        )
