"""Screen controllers. Each builds one ft.View for a route."""
