"""Named navigation targets the auth guard and views redirect to."""

HOME = "/"
LOGIN = "/login"
