from .schemas import QuoteRequest

# Placeholder carrier offers until a rating engine is wired in
MOCK_QUOTES = [
    {"carrier": "FedEx Freight", "service": "Priority", "rate": 450.00, "transit_days": 2, "score": 95},
    {"carrier": "XPO Logistics", "service": "Standard", "rate": 320.00, "transit_days": 4, "score": 88},
    {"carrier": "Old Dominion", "service": "Guaranteed", "rate": 510.00, "transit_days": 2, "score": 98},
]

def get_quotes(request: QuoteRequest) -> list[dict]:
    """Return the fixed quote set, best recommendation first."""
    return sorted((dict(q) for q in MOCK_QUOTES), key=lambda q: q["score"], reverse=True)
