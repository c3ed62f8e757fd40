"""Program schedule engine: template → dated schedule → adapted → progress-annotated."""
