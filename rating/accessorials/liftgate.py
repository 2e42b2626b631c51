"""Liftgate Service - truck liftgate needed at pickup or delivery (no dock)."""

from .base import Accessorial


class Liftgate(Accessorial):

    name = "LIFTGATE"
    codes = ("liftgate", "liftgate_delivery")
    charge_name = "Liftgate Service"

    list_price = 75.00
