"""payment-queries - Read-only queries and aggregations over payment records."""
