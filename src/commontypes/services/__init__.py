"""Service layer — operations over value types returning ServiceResult."""
