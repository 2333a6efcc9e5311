from arraybag.interface.bag import Bag

__all__ = ["Bag"]
