"""
Seed data for the demo services.

Records are written in the backend's JSON shape so the DemoLedger loads them
through the same ``from_dict`` parsers the live services use.

The demo wallet starts unbound. Bind it to "Acme Supply Co." on the
enterprise page to create and issue invoices; the market already lists one
tokenized batch from Initech Retail.
"""

ACME_ADDRESS = "0xAc3e00000000000000000000000000000000A001"
GLOBEX_ADDRESS = "0x61b0e50000000000000000000000000000000B02"
INITECH_ADDRESS = "0x1417ec0000000000000000000000000000000C03"

ENTERPRISES = [
    {
        "id": "6650a1f0c1e4a2b3d4e5f601",
        "name": "Acme Supply Co.",
        "wallet_address": ACME_ADDRESS,
        "status": "Verified",
        "kyc_details_ipfs_hash": "QmAcmeKycDocs4sLx1",
    },
    {
        "id": "6650a1f0c1e4a2b3d4e5f602",
        "name": "Globex Manufacturing",
        "wallet_address": GLOBEX_ADDRESS,
        "status": "Verified",
        "kyc_details_ipfs_hash": "QmGlobexKycDocs9Pq2",
    },
    {
        "id": "6650a1f0c1e4a2b3d4e5f603",
        "name": "Initech Retail",
        "wallet_address": INITECH_ADDRESS,
        "status": "Verified",
        "kyc_details_ipfs_hash": None,
    },
]

INVOICES = [
    {
        "id": "6650b2a0c1e4a2b3d4e5f701",
        "invoice_number": "INV-1001",
        "creditor_id": "6650a1f0c1e4a2b3d4e5f601",
        "debtor_id": "6650a1f0c1e4a2b3d4e5f602",
        "amount": "12500",
        "currency": "USDT",
        "due_date": "2027-01-15T00:00:00Z",
        "status": "Verified",
        "ipfs_hash": "QmInv1001Doc",
        "payee": ACME_ADDRESS,
        "payer": GLOBEX_ADDRESS,
        "contract_hash": "QmInv1001Contract",
        "is_valid": True,
        "annual_interest_rate": 5.0,
        "created_at": "2026-09-01T09:30:00Z",
    },
    {
        "id": "6650b2a0c1e4a2b3d4e5f702",
        "invoice_number": "INV-1002",
        "creditor_id": "6650a1f0c1e4a2b3d4e5f601",
        "debtor_id": "6650a1f0c1e4a2b3d4e5f602",
        "amount": "8400",
        "currency": "USDT",
        "due_date": "2027-02-28T00:00:00Z",
        "status": "Verified",
        "ipfs_hash": "QmInv1002Doc",
        "payee": ACME_ADDRESS,
        "payer": GLOBEX_ADDRESS,
        "contract_hash": "QmInv1002Contract",
        "is_valid": True,
        "annual_interest_rate": 5.0,
        "created_at": "2026-09-12T14:05:00Z",
    },
    {
        "id": "6650b2a0c1e4a2b3d4e5f703",
        "invoice_number": "INV-1003",
        "creditor_id": "6650a1f0c1e4a2b3d4e5f601",
        "debtor_id": "6650a1f0c1e4a2b3d4e5f603",
        "amount": "3100.50",
        "currency": "USDC",
        "due_date": "2026-12-31T00:00:00Z",
        "status": "Pending",
        "ipfs_hash": "QmInv1003Doc",
        "payee": ACME_ADDRESS,
        "payer": INITECH_ADDRESS,
        "contract_hash": "QmInv1003Contract",
        "created_at": "2026-10-02T11:00:00Z",
    },
    {
        "id": "6650b2a0c1e4a2b3d4e5f704",
        "invoice_number": "INV-0907",
        "creditor_id": "6650a1f0c1e4a2b3d4e5f603",
        "debtor_id": "6650a1f0c1e4a2b3d4e5f602",
        "amount": "50000",
        "currency": "USDT",
        "due_date": "2027-03-31T00:00:00Z",
        "status": "OnSale",
        "ipfs_hash": "QmInv0907Doc",
        "batch_id": "6650c3b0c1e4a2b3d4e5f801",
        "payee": INITECH_ADDRESS,
        "payer": GLOBEX_ADDRESS,
        "contract_hash": "QmInv0907Contract",
        "is_valid": True,
        "annual_interest_rate": 6.5,
        "created_at": "2026-08-20T08:00:00Z",
    },
]

INVOICE_BATCHES = [
    {
        "id": "6650c3b0c1e4a2b3d4e5f801",
        "creditor_name": "Initech Retail",
        "debtor_name": "Globex Manufacturing",
        "accepted_currency": "USDT",
        "status": "Trading",
        "created_at": "2026-08-25T10:00:00Z",
        "invoice_count": 1,
        "total_amount": "50000",
        "token_batch_id": "6650d4c0c1e4a2b3d4e5f901",
    },
]

# creditor and invoice batch per token batch, which the DTOs do not carry
TOKEN_BATCH_LINKS = {
    "6650d4c0c1e4a2b3d4e5f901": {
        "creditor_id": "6650a1f0c1e4a2b3d4e5f603",
        "invoice_batch_id": "6650c3b0c1e4a2b3d4e5f801",
    },
}

TOKEN_BATCHES = [
    {
        "id": "6650d4c0c1e4a2b3d4e5f901",
        "batch_reference": "BATCH-6650c3",
        "creditor_name": "Initech Retail",
        "debtor_name": "Globex Manufacturing",
        "stablecoin_symbol": "USDT",
        "total_token_supply": "500",
        "token_value": "100",
        "total_value": "50000",
        "sold_token_amount": "120",
        "available_token_amount": "380",
        "status": "Available",
        "interest_rate_apy": "6.50",
        "maturity_date": "2027-03-31T00:00:00Z",
    },
]

TOKEN_MARKETS = [
    {
        "id": "6650e5d0c1e4a2b3d4e5fa01",
        "batch_id": "6650d4c0c1e4a2b3d4e5f901",
        "batch_reference": "BATCH-6650c3",
        "creditor_address": INITECH_ADDRESS,
        "debtor_address": GLOBEX_ADDRESS,
        "stablecoin_symbol": "USDT",
        "total_token_amount": "500",
        "sold_token_amount": "120",
        "available_token_amount": "380",
        "token_value_per_unit": "100",
        "remaining_transaction_amount": "38000",
    },
]
