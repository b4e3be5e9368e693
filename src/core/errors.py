"""
Curve Errors — Таксономия ошибок движка bonding curve

Все ошибки синхронные: движок не выполняет I/O, поэтому retry-политики нет.
Вызывающий код переводит их в пользовательские сообщения валидации.

Иерархия:
    CurveError
    ├── InvalidAmount (ValueError)       — неположительный / вне domain ввод
    │   └── InsufficientSupply           — продажа больше circulating supply
    └── DomainOverflow (ArithmeticError) — аргумент exp/log вне безопасного диапазона
"""


class CurveError(Exception):
    """Базовая ошибка движка bonding curve."""

    pass


class InvalidAmount(CurveError, ValueError):
    """
    Некорректное количество или supply.

    Возникает при отрицательных значениях, NaN/Inf, fee_bps вне 0..10000,
    либо когда операция выводит supply за пределы [0, max_supply].
    """

    pass


class InsufficientSupply(InvalidAmount):
    """Попытка продать больше токенов, чем находится в обращении."""

    pass


class DomainOverflow(CurveError, ArithmeticError):
    """
    Аргумент exp/log вне безопасного диапазона float.

    В валидном domain supply недостижимо при штатных константах кривой,
    но проверяется явно вместо молчаливого Infinity/NaN.
    """

    pass
