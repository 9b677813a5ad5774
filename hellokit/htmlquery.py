"""CSS-selector queries over HTML documents."""

import argparse
import sys
from dataclasses import dataclass

from bs4 import BeautifulSoup

EXAMPLE = """<!DOCTYPE html>
<html>
	<head>
		<title>
		the title of the page
		</title>
	</head>
<body>
	<div class=hey custom_attr="wow"><h2>Title here</h2></div>
	<span><h2>Yoyoyo</h2></span>
	<div id="x">
		<span>
			content<a href="xxx"><div><li>1st div content</li></div></a>
		</span>
	</div>
	<div class="yo hey">
		<a href="xyz"><div class="cow sheep bunny"><h8>h8 content</h8></div></a>
	</div>
</body>
</html>
"""


def _value(raw) -> str:
    return " ".join(raw) if isinstance(raw, list) else raw


@dataclass(frozen=True)
class Selection:
    """The elements matched by a selector, in document order."""

    elements: tuple

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def html(self) -> str:
        """Inner HTML of the first element, or "" when nothing matched."""
        if not self.elements:
            return ""
        return "".join(str(child) for child in self.elements[0].contents)

    def text(self) -> str:
        """Text of all matched elements, concatenated."""
        return "".join(element.get_text() for element in self.elements)

    def attr(self, name: str) -> str:
        """Value of the attribute on the first element that has it, or ""."""
        for element in self.elements:
            raw = element.get(name)
            if raw is not None:
                return _value(raw)
        return ""

    def attrs(self, name: str) -> list[str]:
        """Values of the attribute on every element that has it."""
        return [_value(e.get(name)) for e in self.elements if e.get(name) is not None]

    def has_class(self, name: str) -> bool:
        return any(name in element.get_attribute_list("class") for element in self.elements)


def select(markup, selector: str) -> Selection:
    """Match selector against markup; an empty selector matches every element."""
    soup = BeautifulSoup(markup, "html.parser")
    if not selector.strip():
        return Selection(tuple(soup.find_all(True)))
    return Selection(tuple(soup.select(selector)))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run sample queries over an HTML document.")
    parser.add_argument("file", nargs="?", help="HTML file to query (default: built-in example)")
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as fp:
            markup = fp.read()
    else:
        markup = EXAMPLE
    for element in select(markup, "a div"):
        print(element)
    print("---")
    for element in select(markup, "a div.cow"):
        print(element)
    print("0 ++++++++++++++++++")
    print(select(markup, "html head title").html().strip("\r\n\t "))
    print(select(markup, "body div").attr("custom_attr"))
    print(select(markup, "body div").attr("id"))
    print("1 ++++++++++++++++++")
    print(select(markup, "body div.yo").html())
    print("11 ++++++++++++++++++")
    print(select(markup, "body div.yo").text())
    print("111 ++++++++++++++++++")
    print(select(markup, "body div").html())
    print("2 ++++++++++++++++++")
    for selector in ("a div li", "span a div li", "div span a div li", "body div span a div li"):
        print(select(markup, selector).html())
    print("3 ++++++++++++++++++")
    print(select(markup, "a div h8").html())
    print("4 ++++++++++++++++++")
    print("true" if select(markup, "div").has_class("yo") else "false")
    print("5 ++++++++++++++++++")
    print("[" + " ".join(select(markup, "").attrs("href")) + "]")
    print("6 ++++++++++++++++++")
    print(select(markup, "body span h2").html())
    return 0


if __name__ == "__main__":
    sys.exit(main())