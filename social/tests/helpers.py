from social.models import Follow, User


def make_user(name="Alice", **kwargs):
    """Create and return a user."""
    return User.objects.create(name=name, **kwargs)


def make_users(*names):
    """Create one user per name and return them in order."""
    return [make_user(name) for name in names]


def make_follow(follower, followee):
    """Create a raw follow edge without going through the service."""
    return Follow.objects.create(follower=follower, followee=followee)
