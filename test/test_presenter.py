from unittest.mock import Mock

from config.widget import (
    ALERTS_DISPLAY_ID, ERROR_MESSAGE_ID, STATE_INPUT_ID, FETCH_BUTTON_ID,
    BUTTON_LABEL, LOADING_LABEL
)
from models import AlertResponse
from presentation import (
    Page, PageSurface, format_summary, render_success, render_error, clear_error, clear_input
)


def display_items(page):
    return page.get_element_by_id(ALERTS_DISPLAY_ID).children


class TestRenderSuccess:
    """Тесты отображения успешного ответа"""

    def test_summary_and_headlines(self, page, surface, two_alerts_payload):
        """Тест сводки и списка заголовков в порядке ответа"""
        render_success(surface, AlertResponse.model_validate(two_alerts_payload))

        summary, headlines = display_items(page)
        assert summary.tag == "p"
        assert summary.text == "T: 2"
        assert "summary-message" in summary.classes
        assert headlines.tag == "ul"
        assert "alerts-list" in headlines.classes
        assert [item.text for item in headlines.children] == ["H1", "No headline available"]

    def test_empty_response_has_no_list(self, page, surface):
        """Тест ответа без предупреждений: только сводка"""
        render_success(surface, AlertResponse.model_validate({}))

        items = display_items(page)
        assert len(items) == 1
        assert items[0].text == "Current watches, warnings, and advisories: 0"

    def test_null_features_and_empty_title(self, page, surface):
        """Тест пустого заголовка и features=null"""
        render_success(surface, AlertResponse.model_validate({"title": "", "features": None}))

        assert [item.text for item in display_items(page)] == [
            "Current watches, warnings, and advisories: 0"
        ]

    def test_missing_or_null_properties(self, page, surface):
        """Тест предупреждений без properties и с пустым заголовком"""
        data = AlertResponse.model_validate({
            "features": [{}, {"properties": None}, {"properties": {"headline": ""}}]
        })

        render_success(surface, data)

        headlines = display_items(page)[1]
        assert [item.text for item in headlines.children] == ["No headline available"] * 3

    def test_previous_content_cleared(self, page, surface, two_alerts_payload):
        """Тест очистки предыдущего результата"""
        render_success(surface, AlertResponse.model_validate(two_alerts_payload))
        render_success(surface, AlertResponse.model_validate({"title": "Other"}))

        items = display_items(page)
        assert len(items) == 1
        assert items[0].text == "Other: 0"

    def test_format_summary(self):
        """Тест формата сводки"""
        assert format_summary(AlertResponse(title="Alerts for CA")) == "Alerts for CA: 0"

    def test_numeric_title_in_summary(self):
        """Тест числового заголовка в сводке"""
        assert format_summary(AlertResponse.model_validate({"title": 5})) == "5: 0"
        assert format_summary(AlertResponse.model_validate({"title": 0})) == (
            "Current watches, warnings, and advisories: 0"
        )

    def test_works_with_any_surface(self, two_alerts_payload):
        """Тест работы через протокол поверхности без страницы"""
        surface = Mock()

        render_success(surface, AlertResponse.model_validate(two_alerts_payload))

        surface.clear_display.assert_called_once()
        surface.show_summary.assert_called_once_with("T: 2")
        surface.show_headlines.assert_called_once_with(["H1", "No headline available"])

    def test_no_headlines_call_for_zero_alerts(self):
        """Тест что список не показывается при нуле предупреждений"""
        surface = Mock()

        render_success(surface, AlertResponse())

        surface.show_headlines.assert_not_called()


class TestErrorAndInput:
    """Тесты области ошибки и поля ввода"""

    def test_render_error_shows_message(self, page, surface):
        """Тест показа ошибки"""
        render_error(surface, "API Error: 500 Internal Server Error")

        error = page.get_element_by_id(ERROR_MESSAGE_ID)
        assert error.text == "API Error: 500 Internal Server Error"
        assert not error.hidden

    def test_clear_error_hides_message(self, page, surface):
        """Тест очистки и скрытия ошибки"""
        render_error(surface, "Something failed")
        clear_error(surface)

        error = page.get_element_by_id(ERROR_MESSAGE_ID)
        assert error.text == ""
        assert error.hidden

    def test_clear_input(self):
        """Тест очистки поля ввода"""
        page = Page.create_default(input_value="ny")
        clear_input(PageSurface(page))

        assert page.get_element_by_id(STATE_INPUT_ID).value == ""


class TestMissingElements:
    """Тесты отсутствующих элементов страницы"""

    def test_missing_display_is_logged(self, page, surface, error_logs, two_alerts_payload):
        """Тест отсутствия области предупреждений"""
        page.remove(ALERTS_DISPLAY_ID)

        render_success(surface, AlertResponse.model_validate(two_alerts_payload))

        assert any(ALERTS_DISPLAY_ID in message for message in error_logs)

    def test_missing_error_area_is_logged(self, page, surface, error_logs):
        """Тест отсутствия области ошибки"""
        page.remove(ERROR_MESSAGE_ID)

        render_error(surface, "Something failed")
        clear_error(surface)

        assert any(ERROR_MESSAGE_ID in message for message in error_logs)

    def test_missing_input_and_button(self, page, surface):
        """Тест отсутствия поля ввода и кнопки"""
        page.remove(STATE_INPUT_ID)
        page.remove(FETCH_BUTTON_ID)

        clear_input(surface)
        surface.set_busy(True)
        surface.set_busy(False)

        assert surface.read_input() is None


class TestBusyState:
    """Тесты состояния загрузки кнопки"""

    def test_busy_disables_button(self, page, surface):
        """Тест блокировки кнопки"""
        surface.set_busy(True)

        button = page.get_element_by_id(FETCH_BUTTON_ID)
        assert button.disabled
        assert button.text == LOADING_LABEL

    def test_release_restores_original_label(self, page, surface):
        """Тест восстановления исходной надписи"""
        button = page.get_element_by_id(FETCH_BUTTON_ID)
        button.text = "Check alerts"

        surface.set_busy(True)
        surface.set_busy(False)

        assert not button.disabled
        assert button.text == "Check alerts"

    def test_release_without_busy_uses_default_label(self, page, surface):
        """Тест освобождения без предшествующей блокировки"""
        surface.set_busy(False)

        assert page.get_element_by_id(FETCH_BUTTON_ID).text == BUTTON_LABEL


class TestPageRendering:
    """Тесты HTML страницы"""

    def test_initial_page(self, page):
        """Тест исходной страницы"""
        html = page.render()

        assert 'id="state-input"' in html
        assert 'id="fetch-alerts"' in html
        assert 'id="error-message" class="hidden"' in html
        assert 'id="alerts-display"' in html
        assert "Get Weather Alerts" in html

    def test_rendered_alerts(self, page, surface, two_alerts_payload):
        """Тест HTML со списком предупреждений"""
        render_success(surface, AlertResponse.model_validate(two_alerts_payload))

        html = page.render()

        assert '<p class="summary-message">T: 2</p>' in html
        assert "<li>H1</li>" in html
        assert "<li>No headline available</li>" in html

    def test_headlines_are_escaped(self, page, surface):
        """Тест экранирования текста из ответа API"""
        data = AlertResponse.model_validate({"features": [{"properties": {"headline": "<script>x</script>"}}]})
        render_success(surface, data)

        html = page.render()

        assert "<script>x</script>" not in html
        assert "&lt;script&gt;x&lt;/script&gt;" in html
