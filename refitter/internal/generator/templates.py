from ... import __version__

TOOL_NAME = "Refitter"


class Templates:
    """Шаблоны генерируемого C# кода"""

    auto_generated_header = (
        "// <auto-generated>\n"
        f"//     This code was generated by {TOOL_NAME}.\n"
        "// </auto-generated>\n"
    )

    namespace_block = "namespace {namespace}\n{{\n{body}\n}}"

    using_statement = "using {namespace};"

    generated_code_attribute_name = "System.CodeDom.Compiler.GeneratedCode"

    generated_code_arguments = [f'"{TOOL_NAME}"', f'"{__version__}"']

    json_property_name_attribute = "System.Text.Json.Serialization.JsonPropertyName"

    json_converter_attribute = "System.Text.Json.Serialization.JsonConverter"

    string_enum_converter = (
        "typeof(System.Text.Json.Serialization.JsonStringEnumConverter)"
    )

    enum_member_attribute = "System.Runtime.Serialization.EnumMember"

    http_method_attributes = {
        "get": "Get",
        "put": "Put",
        "post": "Post",
        "delete": "Delete",
        "options": "Options",
        "head": "Head",
        "patch": "Patch",
    }


templates = Templates()
