class Universe:
    """
    The base class for universe. Keeps track of the planetary systems.
    """

    def __init__(self) -> None:
        if not hasattr(self, "systems"):
            self.systems = []

    def __repr__(self):
        str = f"{self.type} universe\n"
        str += f"{len(self.systems)} systems generated"
        return str

    def __len__(self):
        return len(self.systems)
