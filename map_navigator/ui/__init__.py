"""User interface layer (Gradio)."""
