from __future__ import annotations
from typing import Dict

DEFAULT_LOCALE = "en"

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "trait.decisive": "Decisive",
        "trait.attentive": "Attentive",
        "trait.active": "Active",
        "trait.systematic": "Systematic",
        "trait.quick": "Quick-reacting",
        "trait.energetic": "Energetic",
        "trait.balanced": "Balanced",
        "insight.energetic": "You show an energetic, goal-driven interaction style",
        "insight.methodical": "Your approach is methodical, with close attention to detail",
        "insight.intuitive": "You make decisions quickly and act on intuition",
        "insight.balanced": "You show an adaptive, balanced behavior style",
        "timeline.click": "Click at ({x}, {y})",
        "timeline.keypress": "Key pressed: {key}",
        "scroll.energetic": "Energetic",
        "scroll.smooth": "Smooth",
        "unit.speed": "{value} px/sec",
        "unit.frequency": "{value}/min",
    },
    "ru": {
        "trait.decisive": "Решительный",
        "trait.attentive": "Внимательный",
        "trait.active": "Активный",
        "trait.systematic": "Системный",
        "trait.quick": "Быстрореагирующий",
        "trait.energetic": "Энергичный",
        "trait.balanced": "Сбалансированный",
        "insight.energetic": "Вы демонстрируете энергичный и целеустремленный стиль взаимодействия",
        "insight.methodical": "Ваш подход отличается методичностью и вниманием к деталям",
        "insight.intuitive": "Вы быстро принимаете решения и действуете интуитивно",
        "insight.balanced": "Вы проявляете адаптивный и сбалансированный стиль поведения",
        "timeline.click": "Клик в позиции ({x}, {y})",
        "timeline.keypress": "Нажата клавиша: {key}",
        "scroll.energetic": "Энергичный",
        "scroll.smooth": "Плавный",
        "unit.speed": "{value} px/сек",
        "unit.frequency": "{value}/мин",
    },
}


def label(name: str, locale: str = DEFAULT_LOCALE, **fmt) -> str:
    """Look up a display string, falling back to English for unknown locales."""
    table = LABELS.get(locale, LABELS[DEFAULT_LOCALE])
    text = table.get(name, LABELS[DEFAULT_LOCALE][name])
    return text.format(**fmt) if fmt else text
