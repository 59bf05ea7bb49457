from decimal import Decimal, InvalidOperation

from django import template
from django.conf import settings

register = template.Library()

@register.filter(name="cents")
def cents(value, symbol=None):
    """
    Formate un montant entier en centimes : 10000 -> "$100.00".
    Usage: {{ item.price_in_cents|cents }} ou {{ item.price_in_cents|cents:"€" }}
    Le symbole par défaut vient de settings.INVENTORY_CURRENCY_SYMBOL.
    """
    if value is None or value == "":
        return ""
    try:
        amount = Decimal(int(value)) / 100
    except (TypeError, ValueError, InvalidOperation):
        return ""
    if symbol is None:
        symbol = getattr(settings, "INVENTORY_CURRENCY_SYMBOL", "$")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
