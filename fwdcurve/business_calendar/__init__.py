from .tenors import OffsetToken, parse_offset_code, shift_date

__all__ = ["OffsetToken", "parse_offset_code", "shift_date"]
