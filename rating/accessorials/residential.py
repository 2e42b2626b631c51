"""Residential Delivery - delivery to a home address."""

from .base import Accessorial


class Residential(Accessorial):

    name = "RESIDENTIAL"
    codes = ("residential", "residential_delivery")
    charge_name = "Residential Delivery"

    list_price = 25.00
