"""Operations on parsed contact records."""
