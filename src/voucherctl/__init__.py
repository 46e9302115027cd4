"""voucherctl: single-use percentage voucher rules and storage."""

__version__ = "0.1.0"
