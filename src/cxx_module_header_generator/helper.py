"""Helper functionality that is used in other modules of this package."""

from __future__ import annotations

import re
from dataclasses import dataclass

SLOT_PATTERN = re.compile(r"::_([A-Z][A-Z0-9_]*?)_::")


@dataclass(frozen=True)
class TemplateSlot:
    """A named placeholder inside a template."""

    name: str


class Template:
    """A text template made of literal fragments and named slots.

    Slots are written as `::_NAME_::` in the source text. The source is split once,
    on construction. Rendering joins the fragments and fills every occurrence of a
    slot with its value. Values are never scanned for slots again, so a value that
    happens to look like a placeholder ends up in the output verbatim.

    Examples:
        >>> Template("virtual ::_RETURN_VALUE_:: f();").render(return_value="void")
        'virtual void f();'
    """

    def __init__(self, source: str):
        self.fragments: list[str | TemplateSlot] = []

        position = 0
        for match in SLOT_PATTERN.finditer(source):
            if match.start() > position:
                self.fragments.append(source[position : match.start()])
            self.fragments.append(TemplateSlot(match.group(1).lower()))
            position = match.end()

        if position < len(source):
            self.fragments.append(source[position:])

    @property
    def slot_names(self) -> set[str]:
        return {fragment.name for fragment in self.fragments if isinstance(fragment, TemplateSlot)}

    def render(self, **values: str) -> str:
        """Fill all slots of the template.

        Args:
            **values (str): One value per slot, keyed by the lower case slot name.

        Raises:
            KeyError: If a slot has no value, or a value has no slot.

        Returns:
            str: The rendered text.
        """
        unknown = set(values) - self.slot_names
        if unknown:
            raise KeyError(f"The template has no slot(s) named {sorted(unknown)}.")

        parts: list[str] = []
        for fragment in self.fragments:
            if isinstance(fragment, TemplateSlot):
                try:
                    parts.append(values[fragment.name])
                except KeyError:
                    raise KeyError(f"No value was provided for the template slot '{fragment.name}'.") from None
            else:
                parts.append(fragment)

        return "".join(parts)
