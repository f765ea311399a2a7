import logging
import re
from dataclasses import dataclass, field
from typing import List

from ...settings import GenerationSettings
from ..types.document import Document, Operation
from ..utils.naming import pascal_case
from .templates import templates
from .types import TypeResolver

logger = logging.getLogger(__name__)


def operation_name(operation: Operation) -> str:
    """Базовое имя метода: operationId или HTTP метод + сегменты пути"""
    if operation.operation_id:
        name = pascal_case(operation.operation_id)
        if name:
            return name

    segments = [
        pascal_case(segment.strip("{}"))
        for segment in operation.path.strip("/").split("/")
        if segment
    ]
    return pascal_case(operation.verb) + "".join(segments)


@dataclass
class GeneratorContext:
    """
    Общее состояние одного запуска генерации: настройки, документ и резолвер типов.

    Создается заново на каждый вызов generate() и передается обоим генераторам явно.
    """

    settings: GenerationSettings
    document: Document
    types: TypeResolver = field(init=False)

    def __post_init__(self):
        self.types = TypeResolver(self.document.schemas)

    @property
    def accessibility(self) -> str:
        return self.settings.type_accessibility.value

    def included_operations(self) -> List[Operation]:
        """
        Операции после фильтров include_tags и include_path_matches.

        Операции с методами без Refit атрибута (trace) пропускаются.
        """
        operations = []
        for operation in self.document.operations:
            if operation.verb in templates.http_method_attributes:
                operations.append(operation)
            else:
                logger.debug("Пропуск операции %s %s", operation.verb, operation.path)

        if self.settings.include_tags:
            tags = set(self.settings.include_tags)
            operations = [op for op in operations if tags.intersection(op.tags)]

        if self.settings.include_path_matches:
            patterns = [re.compile(p) for p in self.settings.include_path_matches]
            operations = [
                op for op in operations if any(p.search(op.path) for p in patterns)
            ]

        return operations
