"""Operations of the B2 API."""
