"""Service layer — name operations wrapped in the ServiceResult contract."""
