from rich.pretty import pprint

from plinth import *


class ServerConsole(Console):
    def send_message(self, message, /):
        print(message)

    def has_permission(self, permission, /):
        return True


if __name__ == '__main__':
    __prog__ = "plinth-demo"

    arguments = CommandArguments.split(ServerConsole(), "give", '/give Steve "diamond sword" 64')
    pprint(arguments)
    arguments.send_message(f"{arguments.argument(0)} receives {arguments.argument_as_int(2)}x {arguments.argument(1)}")

    try:
        arguments.sender_as(Player)
    except SenderMismatchError as fault:
        trigger(fault, shell=True, fancy=True, colorful=True)
