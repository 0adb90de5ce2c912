"""Quick-commerce storefront: single-store cart state machine and guest checkout."""
