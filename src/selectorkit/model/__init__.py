from selectorkit.model.category import ORDER, Category

__all__ = ["Category", "ORDER"]
