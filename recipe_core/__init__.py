"""Recipe domain core: value objects and the Recipe aggregate."""
