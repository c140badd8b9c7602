from backend.models.valuations import BookValueTrace
from backend.valuation.floors import BOOK_VALUE_FLOOR, apply_floor


def compute_book_valuation(total_assets: float, total_liabilities: float) -> tuple[float, BookValueTrace]:
    """Net assets (assets - liabilities), floored at 1,000."""
    book_value = total_assets - total_liabilities
    final_value, floor_applied = apply_floor(book_value, BOOK_VALUE_FLOOR)

    return final_value, BookValueTrace(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        book_value=book_value,
        floor=BOOK_VALUE_FLOOR,
        floor_applied=floor_applied,
        final_value=final_value,
    )
