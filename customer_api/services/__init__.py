"""Services Layer — persistence operations behind the CustomerRepository protocol."""
