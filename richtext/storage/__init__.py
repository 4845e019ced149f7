"""Writers persisting split results."""
