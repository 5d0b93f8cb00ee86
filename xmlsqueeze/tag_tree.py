"""Tree describing which tags may nest inside which."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class TagNode:
    """A tag name with its allowed child tags."""

    value: str
    parent: "TagNode | None" = None
    children: list = field(default_factory=list)

    def add_child(self, value):
        """Create, attach and return a child node named ``value``."""
        node = TagNode(value, parent=self)
        self.children.append(node)
        return node

    def child(self, value):
        """Return the first child named ``value``, or None."""
        return next((c for c in self.children if c.value == value), None)

    def is_child(self, value):
        """Return True if a child named ``value`` exists."""
        return self.child(value) is not None

    def render(self, depth=0):
        """Return an indented outline of this subtree."""
        lines = ["  " * depth + f"|-- {self.value}\n"]
        lines.extend(c.render(depth + 1) for c in self.children)
        return "".join(lines)


def social_network_tree():
    """Build the fixed tag layout of the social network document format."""
    users = TagNode("users")
    user = users.add_child("user")
    user.add_child("id")
    user.add_child("name")
    posts = user.add_child("posts")
    followers = user.add_child("followers")
    post = posts.add_child("post")
    post.add_child("body")
    topics = post.add_child("topics")
    topics.add_child("topic")
    follower = followers.add_child("follower")
    follower.add_child("id")
    return users