"""Welcome message text."""

from __future__ import annotations

from pathlib import Path

WELCOME_TEMPLATE = (
    "Добро пожаловать в команду Академии Международного Бизнеса! 🎉\n\n"
    "Мы очень рады, что ты с нами! \n"
    "Желаем быстрой адаптации, интересных задач и крутых результатов в нашей дружной команде. "
    "Не стесняйся задавать вопросы – здесь всегда помогут и поддержат.\n\n"
    "Важно для всех:\n"
    "📌 В ветке отдела есть форма ежедневного отчёта, которую необходимо заполнять каждый день до 21:00. \n"
    "Это помогает нам быть на одной волне и эффективно работать.\n\n"
    "Давай настраиваться на продуктивную работу и отличное взаимодействие! 🚀\n\n"
    "В общем чате АМБ тебя скоро поприветствуют и там ты увидишь всех нас. \n\n"
    "В ветке \"отчет отдела\"- вся команда твоего отдела, знакомься!\n\n"
    "P.S. Если что-то непонятно – обращайся, с радостью поможем! 😊"
)


def compose_welcome(alias: str, template: str = WELCOME_TEMPLATE) -> str:
    if alias:
        return f"{alias}, {template}"
    return template


def load_template(path: str | Path | None) -> str:
    """Read a replacement template, or return the built-in one."""
    if not path:
        return WELCOME_TEMPLATE
    text = Path(path).read_text(encoding="utf-8").strip()
    return text or WELCOME_TEMPLATE
