"""Debenture: a single fixed-coupon bond with persisted terms and coupon calculation."""

__version__ = "0.1.0"
