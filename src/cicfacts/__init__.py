"""Facts and resource types for Customer Interaction Center hosts."""
