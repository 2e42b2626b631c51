"""Appointment Delivery - consignee requires a booked delivery window."""

from .base import Accessorial


class Appointment(Accessorial):

    name = "APPOINTMENT"
    codes = ("appointment", "appointment_delivery")
    charge_name = "Appointment Delivery"

    list_price = 35.00
