"""Константы виджета: идентификаторы элементов страницы и тексты."""

# Идентификаторы элементов страницы
ALERTS_DISPLAY_ID = "alerts-display"
ERROR_MESSAGE_ID = "error-message"
STATE_INPUT_ID = "state-input"
FETCH_BUTTON_ID = "fetch-alerts"

# Надписи кнопки
BUTTON_LABEL = "Get Weather Alerts"
LOADING_LABEL = "Loading..."

# CSS классы
HIDDEN_CLASS = "hidden"
SUMMARY_CLASS = "summary-message"
ALERTS_LIST_CLASS = "alerts-list"

# Тексты по умолчанию
DEFAULT_TITLE = "Current watches, warnings, and advisories"
NO_HEADLINE = "No headline available"

# Сообщения валидации
EMPTY_INPUT_MESSAGE = "Please enter a state abbreviation"
WRONG_FORMAT_MESSAGE = "State abbreviation must be exactly 2 letters"
