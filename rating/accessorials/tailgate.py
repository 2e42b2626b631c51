"""Tailgate Service - freight unloaded to the tailgate only."""

from .base import Accessorial


class Tailgate(Accessorial):

    name = "TAILGATE"
    codes = ("tailgate",)
    charge_name = "Tailgate Service"

    list_price = 45.00
