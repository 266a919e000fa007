"""Service layer — wraps the domain codec in the ServiceResult contract."""
