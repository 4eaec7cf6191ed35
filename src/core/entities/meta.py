"""Keys of the ``meta`` table."""

# Global sequence that drives invoice number suffixes
INVOICE_COUNTER_KEY = "invoice_counter"
