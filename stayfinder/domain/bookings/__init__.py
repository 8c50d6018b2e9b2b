"""Booking domain - booking API, price calculator, booking form and detail view"""
