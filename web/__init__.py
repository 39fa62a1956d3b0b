"""Small Flask site: home, about and contact pages plus static assets."""
