"""Demo HTTP shell for mdtree."""
