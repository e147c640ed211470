"""Build text from mixed fragments — str, bytes, single bytes, characters."""

from string_builder import Builder

b = Builder()
b.append("it").append(" ").append(b"works").append(ord("!"))
print(b.finalize_as_text(), len(b))
