"""srcfetch - fetch and update source checkouts through external VCS tools."""
