"""Streams the tokens of an XML document and describes them line by line."""

import argparse
import re
import sys
from dataclasses import dataclass
from enum import Enum

SAMPLE = """<!DOCTYPE html>
<html>
	<head>
		<title>
		the title of the page
		</title>
	</head>
	<body>
		<div class="hey" custom_attr="wow"><h2>Title here</h2></div>
		<span><h2>Yoyoyo</h2></span>
		<div id="x">
			<span>
				span content<a href="xxx"><div><li>1st div content</li></div></a>
			</span>
		</div>
		<div class="yo hey">
			<a href="xyz"><div class="cow sheep bunny"><h8>h8 content</h8></div></a>
		</div>
	</body>
</html>
"""

_NAME = r"[^\W\d][\w.\-:]*"
_NAME_RE = re.compile(_NAME)
_ATTR_RE = re.compile(rf"({_NAME})\s*=\s*(?:\"([^\"<]*)\"|'([^'<]*)')")
_SPACE_RE = re.compile(r"\s*")
_REF_RE = re.compile(r"&(#x[0-9A-Fa-f]+|#[0-9]+|[^\W\d][\w.\-]*);")
_ENTITIES = {"amp": "&", "lt": "<", "gt": ">", "apos": "'", "quot": '"'}


class TokenKind(Enum):
    START_ELEMENT = "StartElement"
    END_ELEMENT = "EndElement"
    CHAR_DATA = "CharData"
    DIRECTIVE = "Directive"
    PROC_INST = "ProcInst"
    COMMENT = "Comment"


@dataclass(frozen=True)
class Token:
    """One token. name is the element name or the processing target;
    text is the character data, directive, comment or instruction."""

    kind: TokenKind
    name: str = ""
    attrs: tuple[tuple[str, str], ...] = ()
    text: str = ""


def _local(name: str) -> str:
    return name.rpartition(":")[2]


def _resolve(ref: str) -> str:
    if ref.startswith("#"):
        code = int(ref[2:], 16) if ref.startswith("#x") else int(ref[1:])
        if not 0 < code <= 0x10FFFF:
            raise ValueError(f"invalid character entity &{ref};")
        return chr(code)
    try:
        return _ENTITIES[ref]
    except KeyError:
        raise ValueError(f"invalid character entity &{ref};") from None


def _unescape(raw: str) -> str:
    raw = raw.replace("\r\n", "\n")
    out = []
    pos = 0
    while True:
        amp = raw.find("&", pos)
        if amp < 0:
            out.append(raw[pos:])
            return "".join(out)
        out.append(raw[pos:amp])
        match = _REF_RE.match(raw, amp)
        if match is None:
            raise ValueError(f"invalid character entity at {raw[amp:amp + 12]!r}")
        out.append(_resolve(match.group(1)))
        pos = match.end()


def _find(text: str, marker: str, pos: int, what: str) -> int:
    end = text.find(marker, pos)
    if end < 0:
        raise ValueError(f"unexpected EOF in {what}")
    return end


def _directive_end(text: str, pos: int) -> int:
    depth = 0
    quote = None
    for index in range(pos, len(text)):
        ch = text[index]
        if quote:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "<":
            depth += 1
        elif ch == ">":
            if depth == 0:
                return index
            depth -= 1
    raise ValueError("unexpected EOF in directive")


def tokenize(text: str):
    """Yield the tokens of text in document order; raise ValueError on malformed XML."""
    stack: list[str] = []
    pos = 0
    size = len(text)
    while pos < size:
        if text[pos] != "<":
            end = text.find("<", pos)
            end = size if end < 0 else end
            yield Token(TokenKind.CHAR_DATA, text=_unescape(text[pos:end]))
            pos = end
        elif text.startswith("<?", pos):
            end = _find(text, "?>", pos + 2, "processing instruction")
            body = text[pos + 2:end]
            match = _NAME_RE.match(body)
            if match is None:
                raise ValueError("expected target name after <?")
            yield Token(TokenKind.PROC_INST, name=match.group(), text=body[match.end():].lstrip())
            pos = end + 2
        elif text.startswith("<!--", pos):
            end = _find(text, "-->", pos + 4, "comment")
            yield Token(TokenKind.COMMENT, text=text[pos + 4:end])
            pos = end + 3
        elif text.startswith("<![CDATA[", pos):
            end = _find(text, "]]>", pos + 9, "CDATA section")
            yield Token(TokenKind.CHAR_DATA, text=text[pos + 9:end])
            pos = end + 3
        elif text.startswith("<!", pos):
            end = _directive_end(text, pos + 2)
            yield Token(TokenKind.DIRECTIVE, text=text[pos + 2:end])
            pos = end + 1
        elif text.startswith("</", pos):
            match = _NAME_RE.match(text, pos + 2)
            if match is None:
                raise ValueError("expected element name after </")
            name = match.group()
            close = _SPACE_RE.match(text, match.end()).end()
            if not text.startswith(">", close):
                raise ValueError(f"invalid characters between </{name} and >")
            if not stack:
                raise ValueError(f"unexpected end element </{name}>")
            if stack[-1] != name:
                raise ValueError(f"element <{stack[-1]}> closed by </{name}>")
            stack.pop()
            yield Token(TokenKind.END_ELEMENT, name=_local(name))
            pos = close + 1
        else:
            pos = yield from _start_element(text, pos, stack)
    if stack:
        raise ValueError(f"unexpected EOF: element <{stack[-1]}> not closed")


def _start_element(text: str, pos: int, stack: list[str]):
    match = _NAME_RE.match(text, pos + 1)
    if match is None:
        raise ValueError(f"expected element name after < at offset {pos}")
    name = match.group()
    index = match.end()
    attrs = []
    while True:
        after = _SPACE_RE.match(text, index).end()
        if text.startswith("/>", after):
            yield Token(TokenKind.START_ELEMENT, name=_local(name), attrs=tuple(attrs))
            yield Token(TokenKind.END_ELEMENT, name=_local(name))
            return after + 2
        if text.startswith(">", after):
            stack.append(name)
            yield Token(TokenKind.START_ELEMENT, name=_local(name), attrs=tuple(attrs))
            return after + 1
        attr = _ATTR_RE.match(text, after)
        if after == index or attr is None:
            if after >= len(text):
                raise ValueError(f"unexpected EOF in element <{name}>")
            raise ValueError(f"malformed attribute in element <{name}>")
        raw = attr.group(2) if attr.group(2) is not None else attr.group(3)
        attrs.append((_local(attr.group(1)), _unescape(raw)))
        index = attr.end()


def describe_tokens(text: str, indent_step: int = 4) -> list[str]:
    """Describe every token of text, nesting elements by indent_step spaces."""
    lines = []
    indent = 0
    for token in tokenize(text):
        pad = " " * indent
        if token.kind is TokenKind.START_ELEMENT:
            lines.append(f"{pad}StartElement ====> Token name: {token.name}")
            indent += indent_step
            pad = " " * indent
            lines.extend(f"{pad}An attribute is: {n} {v}" for n, v in token.attrs)
        elif token.kind is TokenKind.END_ELEMENT:
            indent -= indent_step
            lines.append(f"{' ' * indent}EndElement ===> Token of '{token.name}' end")
        elif token.kind is TokenKind.CHAR_DATA:
            lines.append(f"{pad}    CharData ===> This is the content: {token.text}")
        elif token.kind is TokenKind.DIRECTIVE:
            lines.append(f"{pad}Directive ===> This is the content: {token.text}")
        elif token.kind is TokenKind.PROC_INST:
            lines.append(f"{pad}ProcInst ===> Inst:[{token.text}] Target:[{token.name}]")
        else:
            lines.append(f"{pad}Comment ===> [{token.text}]")
    return lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the tokens of an XML document.")
    parser.add_argument("file", nargs="?", help="XML file (default: built-in sample)")
    parser.add_argument("--indent", type=int, default=4)
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as fp:
            text = fp.read()
    else:
        text = SAMPLE
    try:
        lines = describe_tokens(text, args.indent)
    except ValueError as exc:
        print(f"!!!!!!! ERROR {exc}")
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())