"""Модели данных для виджета погодных предупреждений.

Содержит Pydantic модели для валидации ответа API api.weather.gov,
состояния интерфейса виджета и служебных ответов.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.widget import DEFAULT_TITLE, NO_HEADLINE


class AlertProperties(BaseModel):
    """Свойства отдельного предупреждения.

    Attributes:
        headline: Краткое описание предупреждения
    """

    model_config = ConfigDict(extra="ignore")

    headline: Optional[str] = Field(default=None, description="Заголовок предупреждения")


class Alert(BaseModel):
    """Модель одного предупреждения (GeoJSON feature).

    Attributes:
        properties: Свойства предупреждения
    """

    model_config = ConfigDict(extra="ignore")

    properties: Optional[AlertProperties] = Field(
        default_factory=AlertProperties,
        description="Свойства предупреждения"
    )

    @property
    def headline_text(self) -> str:
        """Заголовок для отображения, с заглушкой если он отсутствует."""
        if self.properties is None or not self.properties.headline:
            return NO_HEADLINE
        return self.properties.headline


class AlertResponse(BaseModel):
    """Ответ эндпоинта активных предупреждений.

    Attributes:
        title: Заголовок коллекции
        features: Предупреждения в порядке ответа API
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, description="Заголовок коллекции")
    features: List[Alert] = Field(default_factory=list, description="Список предупреждений")

    @field_validator("title", mode="before")
    @classmethod
    def _numeric_title_as_text(cls, value):
        # 0 считается пустым заголовком
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value) if value else None
        return value

    @field_validator("features", mode="before")
    @classmethod
    def _features_none_as_empty(cls, value):
        return [] if value is None else value

    @property
    def display_title(self) -> str:
        return self.title or DEFAULT_TITLE

    @property
    def alert_count(self) -> int:
        return len(self.features)

    @property
    def headlines(self) -> List[str]:
        return [alert.headline_text for alert in self.features]


class WidgetState(BaseModel):
    """Состояние интерфейса виджета в рамках одного цикла запроса.

    Attributes:
        busy: Идет ли запрос (кнопка заблокирована)
        error_text: Текущий текст ошибки, пустая строка если ошибки нет
    """

    busy: bool = Field(default=False, description="Флаг выполнения запроса")
    error_text: str = Field(default="", description="Текст текущей ошибки")

    def reset(self) -> None:
        """Сбросить состояние перед новым циклом."""
        self.busy = False
        self.error_text = ""


class ApiError(BaseModel):
    """Модель ошибки API.

    Attributes:
        error_type: Тип ошибки
        message: Сообщение об ошибке
        region: Код региона запроса
        timestamp: Время возникновения ошибки
    """

    error_type: str = Field(..., description="Тип ошибки")
    message: str = Field(..., description="Сообщение об ошибке")
    region: Optional[str] = Field(default=None, description="Код региона")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Время возникновения ошибки"
    )


class HealthCheckResponse(BaseModel):
    """Модель ответа health check endpoint.

    Attributes:
        status: Статус сервиса
        timestamp: Время проверки
        version: Версия приложения
        dependencies: Статусы зависимостей
    """

    status: str = Field(..., description="Статус сервиса")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Время проверки"
    )
    version: str = Field(default="1.0.0", description="Версия приложения")
    dependencies: Dict[str, str] = Field(
        default_factory=dict,
        description="Статусы зависимостей"
    )
