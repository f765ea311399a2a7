from typing import List, Optional

from pydantic import BaseModel

INDENT = "    "


def indent(code: str, level: int = 1) -> str:
    """Сдвиг всех непустых строк блока на level отступов"""
    prefix = INDENT * level
    return "\n".join(prefix + line if line else line for line in code.split("\n"))


class Attribute(BaseModel):
    name: str
    arguments: List[str] = []

    def __str__(self):
        if not self.arguments:
            return f"[{self.name}]"
        return f"[{self.name}({', '.join(self.arguments)})]"


class DocComment(BaseModel):
    summary: Optional[str] = None
    params: List[tuple] = []
    returns: Optional[str] = None

    def __bool__(self):
        return bool(self.summary or self.params or self.returns)

    def __str__(self):
        lines = []

        if self.summary:
            lines.append("/// <summary>")
            for line in self.summary.strip().splitlines():
                lines.append(f"/// {_xml_escape(line.strip())}".rstrip())
            lines.append("/// </summary>")

        for name, description in self.params:
            lines.append(
                f'/// <param name="{name}">{_xml_escape(description.strip())}</param>'
            )

        if self.returns:
            lines.append(f"/// <returns>{_xml_escape(self.returns)}</returns>")

        return "\n".join(lines)


def _xml_escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class Property(BaseModel):
    name: str
    var_type: str
    attributes: List[Attribute] = []
    accessibility: str = "public"
    doc: Optional[DocComment] = None

    def __str__(self):
        return "\n".join(
            filter(
                bool,
                [str(self.doc) if self.doc else ""]
                + [str(attribute) for attribute in self.attributes]
                + [
                    f"{self.accessibility} {self.var_type} {self.name} {{ get; set; }}"
                ],
            )
        )


class ClassDeclaration(BaseModel):
    name: str
    accessibility: str = "public"
    inherits: List[str] = []
    attributes: List[Attribute] = []
    properties: List[Property] = []
    doc: Optional[DocComment] = None

    def __str__(self):
        header = (
            f"{self.accessibility} partial class {self.name}"
            + (f" : {', '.join(self.inherits)}" if self.inherits else "")
        )
        body = "\n\n".join(map(str, self.properties))

        return "\n".join(
            filter(
                bool,
                [str(self.doc) if self.doc else ""]
                + [str(attribute) for attribute in self.attributes]
                + [header, "{", indent(body) if body else "", "}"],
            )
        )


class EnumMember(BaseModel):
    name: str
    value: str
    order: int = 0
    attributes: List[Attribute] = []

    def __str__(self):
        return "\n".join(
            [str(attribute) for attribute in self.attributes]
            + [f"{self.name} = {self.order},"]
        )


class EnumDeclaration(BaseModel):
    name: str
    accessibility: str = "public"
    attributes: List[Attribute] = []
    members: List[EnumMember] = []
    doc: Optional[DocComment] = None

    def __str__(self):
        body = "\n\n".join(map(str, self.members))

        return "\n".join(
            filter(
                bool,
                [str(self.doc) if self.doc else ""]
                + [str(attribute) for attribute in self.attributes]
                + [
                    f"{self.accessibility} enum {self.name}",
                    "{",
                    indent(body) if body else "",
                    "}",
                ],
            )
        )


class MethodParameter(BaseModel):
    name: str
    var_type: str
    attributes: List[Attribute] = []
    default: Optional[str] = None

    def __str__(self):
        return (
            "".join(str(attribute) + " " for attribute in self.attributes)
            + f"{self.var_type} {self.name}"
            + (f" = {self.default}" if self.default else "")
        )


class MethodSignature(BaseModel):
    name: str
    response: str = "Task"
    parameters: List[MethodParameter] = []
    attributes: List[Attribute] = []
    doc: Optional[DocComment] = None

    def __str__(self):
        return "\n".join(
            filter(
                bool,
                [str(self.doc) if self.doc else ""]
                + [str(attribute) for attribute in self.attributes]
                + [
                    f"{self.response} {self.name}("
                    + ", ".join(map(str, self.parameters))
                    + ");"
                ],
            )
        )


class InterfaceDeclaration(BaseModel):
    name: str
    accessibility: str = "public"
    attributes: List[Attribute] = []
    methods: List[MethodSignature] = []
    doc: Optional[DocComment] = None

    def __str__(self):
        body = "\n\n".join(map(str, self.methods))

        return "\n".join(
            filter(
                bool,
                [str(self.doc) if self.doc else ""]
                + [str(attribute) for attribute in self.attributes]
                + [
                    f"{self.accessibility} partial interface {self.name}",
                    "{",
                    indent(body) if body else "",
                    "}",
                ],
            )
        )
