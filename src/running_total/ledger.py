"""Running total and transcript of confirmed entries."""

import logging

from .models import LineKind, Outcome, Recorded, Rejected, TranscriptLine
from .money import USD, AmountParseError, Currency, Money, format_amount, is_positive, parse_amount


class Ledger:
    """Holds the running total and the history lines produced by entries."""

    def __init__(self, currency: Currency = USD):
        """
        Initialize an empty ledger.

        Args:
            currency: The fixed currency all entries are parsed in
        """
        self.currency = currency
        self._total = Money.zero(currency)
        self._transcript: list[TranscriptLine] = []

    def record_attempt(self, raw_text: str) -> Outcome:
        """
        Parse an entry and, if valid, add it to the total.

        A valid entry appends three lines (entry, total, blank). An invalid one
        appends a single error line and leaves the total untouched.

        Args:
            raw_text: The text typed by the user

        Returns:
            Recorded with the new total, or Rejected with the failure reason
        """
        try:
            amount = parse_amount(raw_text, self.currency)
            new_total = self._total + amount
            # Negative amounts already format with their own '-'
            entry_text = format_amount(amount)
            if is_positive(amount):
                entry_text = f"+{entry_text}"
            total_text = format_amount(new_total)
        except AmountParseError as e:
            return self._reject(raw_text, e.reason)
        except ValueError as e:
            return self._reject(raw_text, f"Amount cannot be displayed: {e}")

        self._total = new_total
        self._transcript.extend([
            TranscriptLine(kind=LineKind.ENTRY, text=entry_text),
            TranscriptLine(kind=LineKind.TOTAL, text=total_text),
            TranscriptLine(kind=LineKind.BLANK),
        ])
        logging.info(f"Recorded {entry_text}, total is now {total_text}")
        return Recorded(total=self._total)

    def _reject(self, raw_text: str, reason: str) -> Rejected:
        logging.warning(f"Rejected entry {raw_text[:40]!r}: {reason}")
        self._transcript.append(TranscriptLine(kind=LineKind.ERROR, text=reason))
        return Rejected(reason=reason)

    def reset(self) -> None:
        """Zero the total and clear the transcript."""
        self._total = Money.zero(self.currency)
        self._transcript.clear()
        logging.info("Ledger reset.")

    def transcript_view(self) -> tuple[TranscriptLine, ...]:
        return tuple(self._transcript)

    def total_view(self) -> Money:
        return self._total
