"""Cross-cutting helpers: constants, exceptions and input validators."""
