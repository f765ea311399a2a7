"""
Тесты сборки итогового файла
"""

from refitter.internal.generator.assembler import assemble, generate_client
from refitter.settings import GenerationSettings

HEADER = (
    "// <auto-generated>\n"
    "//     This code was generated by Refitter.\n"
    "// </auto-generated>\n"
    "\n"
)

INTERFACE = "    public partial interface IApi\n    {\n    }"
CONTRACTS = "namespace Demo.Api\n{\n    public partial class Pet\n    {\n    }\n}"
IMPORTS = "using Refit;\nusing System.Threading.Tasks;"


def _settings(**kwargs) -> GenerationSettings:
    return GenerationSettings(openapi_path="spec.json", namespace="Demo.Api", **kwargs)


class TestAssembler:
    """Тесты порядка и формы собранного текста"""

    def test_full_layout(self):
        """Тест точной структуры со всеми частями"""
        output = assemble(_settings(), IMPORTS, INTERFACE, CONTRACTS)

        assert output == (
            HEADER
            + IMPORTS
            + "\n"
            + "\n"
            + "namespace Demo.Api\n{\n"
            + INTERFACE
            + "\n}\n"
            + "\n"
            + "\n"
            + CONTRACTS
            + "\n"
        )

    def test_header_present_once(self):
        """Заголовок в начале и ровно один раз"""
        output = assemble(_settings(), IMPORTS, INTERFACE, CONTRACTS)

        assert output.startswith(HEADER)
        assert output.count("<auto-generated>") == 1

    def test_header_absent(self):
        """Без заголовка нет ни маркера, ни пустой строки на его месте"""
        output = assemble(
            _settings(add_auto_generated_header=False), IMPORTS, INTERFACE, CONTRACTS
        )

        assert "auto-generated" not in output
        assert "This code was generated" not in output
        assert output.startswith("using Refit;\n")

    def test_contracts_disabled(self):
        """Без контрактов завершающий сегмент пуст, интерфейс на месте"""
        output = assemble(
            _settings(generate_contracts=False), IMPORTS, INTERFACE, CONTRACTS
        )

        assert "public partial class Pet" not in output
        assert "namespace Demo.Api\n{\n" + INTERFACE + "\n}\n" in output
        assert output.endswith("\n}\n" + "\n" + "\n" + "\n")

    def test_generate_client(self):
        """Тест клиентского блока без контрактов"""
        client = generate_client(
            _settings(add_auto_generated_header=False), IMPORTS, INTERFACE
        )

        assert client == IMPORTS + "\n\nnamespace Demo.Api\n{\n" + INTERFACE + "\n}\n"

    def test_deterministic(self):
        """Одинаковые входы дают одинаковый текст"""
        first = assemble(_settings(), IMPORTS, INTERFACE, CONTRACTS)
        second = assemble(_settings(), IMPORTS, INTERFACE, CONTRACTS)

        assert first == second
