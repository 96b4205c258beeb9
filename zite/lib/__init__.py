"""Site generation pipeline: tree, includes, layouts, rendering, output."""
