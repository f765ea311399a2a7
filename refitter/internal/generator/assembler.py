"""
Сборка итогового C# файла из готовых фрагментов
"""

from typing import Optional

from ...settings import GenerationSettings
from .templates import templates


def generate_client(
    settings: GenerationSettings, imports: str, interface_body: str
) -> str:
    """Заголовок, using строки и namespace блок с интерфейсом"""
    code = []

    if settings.add_auto_generated_header:
        code.append(templates.auto_generated_header + "\n")

    code.append(imports + "\n")
    code.append("\n")
    code.append(
        templates.namespace_block.format(
            namespace=settings.namespace, body=interface_body
        )
        + "\n"
    )

    return "".join(code)


def assemble(
    settings: GenerationSettings,
    imports: str,
    interface_body: str,
    contracts: Optional[str],
) -> str:
    """
    Итоговый текст в фиксированном порядке.

    Клиентский блок, пустая строка, затем контракты. При выключенном
    generate_contracts на месте контрактов остается пустой сегмент,
    так что структура завершающих переводов строк не меняется.
    """
    client = generate_client(settings, imports, interface_body)
    trailing = contracts if settings.generate_contracts and contracts else ""

    return "".join([client + "\n", "\n", trailing + "\n"])
