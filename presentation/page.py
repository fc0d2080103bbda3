"""Страница виджета и ее поверхность отображения.

Страница хранит элементы, адресуемые по идентификатору, как DOM
в браузере. PageSurface реализует RenderingSurface поверх страницы:
если нужного элемента нет, операция пишет ошибку в лог и ничего не делает.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from jinja2 import Environment

from config.widget import (
    ALERTS_DISPLAY_ID,
    ERROR_MESSAGE_ID,
    STATE_INPUT_ID,
    FETCH_BUTTON_ID,
    BUTTON_LABEL,
    LOADING_LABEL,
    HIDDEN_CLASS,
    SUMMARY_CLASS,
    ALERTS_LIST_CLASS,
)
from utils import get_logger

logger = get_logger(__name__)


@dataclass
class Element:
    """Элемент страницы."""
    tag: str
    id: Optional[str] = None
    text: str = ""
    value: str = ""
    disabled: bool = False
    classes: Set[str] = field(default_factory=set)
    children: List["Element"] = field(default_factory=list)

    @property
    def hidden(self) -> bool:
        return HIDDEN_CLASS in self.classes

    @property
    def class_name(self) -> str:
        return " ".join(sorted(self.classes))


PAGE_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Weather Alerts</title>
    <style>
        body { font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }
        .hidden { display: none; }
        #error-message { color: #b00020; margin: 1rem 0; }
        .summary-message { font-weight: bold; }
    </style>
</head>
<body>
    <h1>Weather Alerts</h1>
    <form method="get" action="/">
        {% if state_input %}<input id="{{ state_input.id }}" name="state" type="text" placeholder="Enter state abbreviation (e.g., CA)" value="{{ state_input.value }}">{% endif %}
        {% if button %}<button id="{{ button.id }}" type="submit"{% if button.disabled %} disabled{% endif %}>{{ button.text }}</button>{% endif %}
    </form>
    {% if error %}<div id="{{ error.id }}"{% if error.classes %} class="{{ error.class_name }}"{% endif %}>{{ error.text }}</div>{% endif %}
    {% if display %}<div id="{{ display.id }}">
        {%- for child in display.children %}
        {%- if child.tag == "ul" %}
        <ul class="{{ child.class_name }}">
            {%- for item in child.children %}
            <li>{{ item.text }}</li>
            {%- endfor %}
        </ul>
        {%- else %}
        <{{ child.tag }} class="{{ child.class_name }}">{{ child.text }}</{{ child.tag }}>
        {%- endif %}
        {%- endfor %}
    </div>{% endif %}
</body>
</html>
'''

_environment = Environment(autoescape=True)
_page_template = _environment.from_string(PAGE_TEMPLATE)


class Page:
    """Набор элементов страницы, доступных по идентификатору."""

    def __init__(self, elements: Iterable[Element] = ()):
        self._elements: Dict[str, Element] = {}
        for element in elements:
            self.add(element)

    @classmethod
    def create_default(cls, input_value: str = "") -> "Page":
        """Создать страницу с четырьмя элементами виджета.

        Args:
            input_value: Начальное значение поля ввода

        Returns:
            Page: Страница в исходном состоянии
        """
        return cls([
            Element(tag="div", id=ALERTS_DISPLAY_ID),
            Element(tag="div", id=ERROR_MESSAGE_ID, classes={HIDDEN_CLASS}),
            Element(tag="input", id=STATE_INPUT_ID, value=input_value),
            Element(tag="button", id=FETCH_BUTTON_ID, text=BUTTON_LABEL),
        ])

    def add(self, element: Element) -> None:
        if element.id:
            self._elements[element.id] = element

    def remove(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def render(self) -> str:
        """Отрендерить страницу в HTML.

        Returns:
            str: HTML документ
        """
        return _page_template.render(
            display=self.get_element_by_id(ALERTS_DISPLAY_ID),
            error=self.get_element_by_id(ERROR_MESSAGE_ID),
            state_input=self.get_element_by_id(STATE_INPUT_ID),
            button=self.get_element_by_id(FETCH_BUTTON_ID),
        )


class PageSurface:
    """Поверхность отображения поверх Page.

    Реализует протокол RenderingSurface. Отсутствие элемента
    никогда не приводит к исключению.
    """

    def __init__(self, page: Page):
        self.page = page
        self._original_label: Optional[str] = None

    def _find(self, element_id: str) -> Optional[Element]:
        element = self.page.get_element_by_id(element_id)
        if element is None:
            logger.error(f"Элемент #{element_id} не найден на странице")
        return element

    def read_input(self) -> Optional[str]:
        state_input = self._find(STATE_INPUT_ID)
        return state_input.value if state_input else None

    def clear_input(self) -> None:
        state_input = self.page.get_element_by_id(STATE_INPUT_ID)
        if state_input:
            state_input.value = ""

    def clear_display(self) -> None:
        display = self._find(ALERTS_DISPLAY_ID)
        if display:
            display.children.clear()

    def show_summary(self, text: str) -> None:
        display = self._find(ALERTS_DISPLAY_ID)
        if display:
            display.children.append(Element(tag="p", text=text, classes={SUMMARY_CLASS}))

    def show_headlines(self, headlines: List[str]) -> None:
        display = self._find(ALERTS_DISPLAY_ID)
        if display:
            items = [Element(tag="li", text=headline) for headline in headlines]
            display.children.append(Element(tag="ul", classes={ALERTS_LIST_CLASS}, children=items))

    def show_error(self, message: str) -> None:
        error = self._find(ERROR_MESSAGE_ID)
        if error:
            error.text = message
            error.classes.discard(HIDDEN_CLASS)

    def clear_error(self) -> None:
        error = self.page.get_element_by_id(ERROR_MESSAGE_ID)
        if error:
            error.text = ""
            error.classes.add(HIDDEN_CLASS)

    def set_busy(self, busy: bool) -> None:
        button = self.page.get_element_by_id(FETCH_BUTTON_ID)
        if button is None:
            logger.debug("Кнопка запроса не найдена, состояние загрузки не отображается")
            return

        if busy:
            if self._original_label is None:
                self._original_label = button.text
            button.disabled = True
            button.text = LOADING_LABEL
        else:
            button.disabled = False
            button.text = self._original_label or BUTTON_LABEL
            self._original_label = None
