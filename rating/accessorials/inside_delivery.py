"""Inside Delivery - freight carried past the threshold."""

from .base import Accessorial


class InsideDelivery(Accessorial):

    name = "INSIDE_DELIVERY"
    codes = ("inside_delivery",)
    charge_name = "Inside Delivery"

    list_price = 50.00
