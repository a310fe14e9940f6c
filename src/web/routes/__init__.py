"""Routes HTTP : /location, /weather, /events, /movies."""
