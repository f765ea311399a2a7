"""
Главный модуль генератора - чистый интерфейс
"""

import logging

from .internal.generator.assembler import assemble
from .internal.generator.context import GeneratorContext
from .internal.generator.contracts import generate_contracts
from .internal.generator.imports import (
    generate_namespace_imports,
    get_imported_namespaces,
    strip_namespace_prefixes,
)
from .internal.generator.interface import generate_interface
from .internal.loader.openapi import load_document
from .internal.types.document import Document
from .settings import GenerationSettings

logger = logging.getLogger(__name__)


class RefitGenerator:
    """
    Генератор Refit клиента для одного загруженного документа.

    Экземпляр создается только через create() и всегда содержит
    загруженный документ. generate() можно вызывать повторно:
    документ и настройки не изменяются.
    """

    def __init__(self, settings: GenerationSettings, document: Document):
        self.settings = settings
        self.document = document

    @classmethod
    async def create(cls, settings: GenerationSettings) -> "RefitGenerator":
        """Загрузка документа по settings.openapi_path"""
        document = await load_document(settings.openapi_path)
        return cls(settings, document)

    def generate(self) -> str:
        """Генерация итогового C# файла"""
        context = GeneratorContext(settings=self.settings, document=self.document)

        contracts = generate_contracts(context)
        interface_body = generate_interface(context)

        namespaces = get_imported_namespaces(self.settings)
        missing = [ns for ns in contracts.namespaces if ns not in namespaces]
        if missing:
            logger.debug("Остаются квалифицированными: %s", ", ".join(missing))

        code = strip_namespace_prefixes(contracts.code, namespaces)

        return assemble(
            self.settings,
            generate_namespace_imports(self.settings),
            interface_body,
            code,
        )


async def generate_code(settings: GenerationSettings) -> str:
    """Загрузка документа и генерация кода за один вызов"""
    generator = await RefitGenerator.create(settings)
    return generator.generate()
