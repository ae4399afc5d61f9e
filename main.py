from rich.pretty import pprint

from declargs import *

registry = Registry()
registry.integer("intarg", "an integer argument.", 128)
registry.string("strarg", "a string argument.", "default")
registry.boolean("boolarg", "a boolean argument.")


if __name__ == '__main__':
    pprint(invoke(registry))
