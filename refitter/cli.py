import argparse
import asyncio
import logging
import os
import sys

from refitter.config import CONFIG_FILE_NAME, RefitterConfig
from refitter.errors import RefitterError
from refitter.generator import generate_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация Refit интерфейса C# из OpenAPI спецификации"
    )
    parser.add_argument(
        "openapi_path", nargs="?", help="Путь или URL к OpenAPI спецификации"
    )
    parser.add_argument("--namespace", type=str, help="Пространство имен C#")
    parser.add_argument(
        "--output", dest="output_path", type=str, help="Файл результата"
    )
    parser.add_argument(
        "--interface-name", type=str, help="Имя интерфейса вместо title документа"
    )
    parser.add_argument(
        "--no-contracts",
        dest="generate_contracts",
        action="store_false",
        default=None,
        help="Не генерировать контракты",
    )
    parser.add_argument(
        "--no-auto-generated-header",
        dest="add_auto_generated_header",
        action="store_false",
        default=None,
        help="Без заголовка <auto-generated>",
    )
    parser.add_argument(
        "--no-xml-doc-comments",
        dest="generate_xml_doc_code_comments",
        action="store_false",
        default=None,
        help="Без XML документации",
    )
    parser.add_argument(
        "--no-operation-headers",
        dest="generate_operation_headers",
        action="store_false",
        default=None,
        help="Не генерировать [Header] параметры",
    )
    parser.add_argument(
        "--use-cancellation-tokens",
        action="store_true",
        default=None,
        help="Добавить CancellationToken в каждый метод",
    )
    parser.add_argument(
        "--use-iso-date-format",
        action="store_true",
        default=None,
        help="Формат yyyy-MM-dd для date query параметров",
    )
    parser.add_argument(
        "--return-iapi-response",
        action="store_true",
        default=None,
        help="Возвращать IApiResponse<T>",
    )
    parser.add_argument(
        "--internal",
        dest="type_accessibility",
        action="store_const",
        const="internal",
        help="Генерировать internal типы",
    )
    parser.add_argument(
        "--additional-namespace",
        dest="additional_namespaces",
        action="append",
        default=[],
        help="Дополнительный using (можно повторять)",
    )
    parser.add_argument(
        "--exclude-namespace",
        dest="exclude_namespaces",
        action="append",
        default=[],
        help="Regex для исключения using (можно повторять)",
    )
    parser.add_argument(
        "--tag",
        dest="include_tags",
        action="append",
        default=[],
        help="Генерировать только операции с тегом (можно повторять)",
    )
    parser.add_argument(
        "--match-path",
        dest="include_path_matches",
        action="append",
        default=[],
        help="Генерировать только пути по regex (можно повторять)",
    )
    parser.add_argument(
        "--settings-file", type=str, help=f"Путь к {CONFIG_FILE_NAME}"
    )
    parser.add_argument(
        "--init-config", action="store_true", help=f"Создать {CONFIG_FILE_NAME}"
    )
    parser.add_argument("--verbose", action="store_true", help="Отладочный вывод")
    return parser


def _load_config(args) -> RefitterConfig:
    """Конфиг из файла (если есть), поверх него аргументы командной строки"""
    if args.settings_file:
        file_config = RefitterConfig.from_file(args.settings_file)
        if file_config is None:
            raise ValueError(f"Файл настроек не найден: {args.settings_file}")
        print(f"📋 Используется конфиг {args.settings_file}")
    else:
        file_config = RefitterConfig.from_file()
        if file_config:
            print(f"📋 Используется конфиг из {CONFIG_FILE_NAME}")

    config = file_config or RefitterConfig()
    if args.interface_name:
        args.use_openapi_title = False
    return config.merge_with_args(args)


def _write_output(code: str, output_path: str):
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(code)


def generate(argv=None):
    """Команда генерации Refit клиента"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = _load_config(args)
    except ValueError as e:
        print(f"❌ Ошибка: {e}")
        sys.exit(1)

    if args.init_config:
        config.save_to_file(args.settings_file or CONFIG_FILE_NAME)
        print(f"✅ Создан конфиг файл {args.settings_file or CONFIG_FILE_NAME}")
        return

    if not config.openapi_path:
        print(
            "❌ Ошибка: Укажите путь к спецификации или создайте конфиг с --init-config"
        )
        sys.exit(1)

    print(f"🚀 Генерация клиента из {config.openapi_path}")

    try:
        code = asyncio.run(generate_code(config.to_settings()))
        _write_output(code, config.output_path)
    except (RefitterError, ValueError, OSError) as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)

    print("✅ Генерация завершена успешно!")
    print(f"📦 Клиент создан в: {os.path.abspath(config.output_path)}")


if __name__ == "__main__":
    generate()
