"""Chat rooms with and without a central mediator."""

from __future__ import annotations

from typing import List, Tuple


class ChatMediator:
    """Routes broadcast and private messages between registered users."""

    def __init__(self) -> None:
        self.colleagues: List["ChatUser"] = []
        self.mutes: List[Tuple[str, str]] = []  # (muter, muted)

    def register_colleague(self, colleague: "ChatUser") -> None:
        self.colleagues.append(colleague)

    def mute(self, who: str, whom: str) -> None:
        """Stop messages from ``whom`` reaching ``who``."""
        self.mutes.append((who, whom))

    def _is_muted(self, recipient: str, sender: str) -> bool:
        return (recipient, sender) in self.mutes

    def send(self, sender: str, message: str) -> List[str]:
        """Broadcast a message; return the names of those who received it."""
        print(f"[{sender} broadcasts]: {message}")
        delivered = []
        for colleague in self.colleagues:
            if colleague.name == sender or self._is_muted(colleague.name, sender):
                continue
            colleague.receive(sender, message)
            delivered.append(colleague.name)
        return delivered

    def send_private(self, sender: str, recipient: str, message: str) -> bool:
        """Send a message to one user; return whether it was delivered."""
        print(f"[{sender}→{recipient}]: {message}")
        for colleague in self.colleagues:
            if colleague.name == recipient:
                if self._is_muted(recipient, sender):
                    print("\n[Message is muted]")
                    return False
                colleague.receive(sender, message)
                return True
        print(f'[Mediator] User "{recipient}" not found]')
        return False


class ChatUser:
    """A chat participant that talks only through its mediator."""

    def __init__(self, name: str, mediator: ChatMediator) -> None:
        self.name = name
        self.mediator = mediator
        self.inbox: List[Tuple[str, str]] = []
        mediator.register_colleague(self)

    def send(self, message: str) -> List[str]:
        return self.mediator.send(self.name, message)

    def send_private(self, recipient: str, message: str) -> bool:
        return self.mediator.send_private(self.name, recipient, message)

    def receive(self, sender: str, message: str) -> None:
        self.inbox.append((sender, message))
        print(f"    {self.name} got from {sender}: {message}")


class PeerUser:
    """A chat participant wired directly to each of its peers."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.peers: List[PeerUser] = []
        self.muted_users: List[str] = []
        self.inbox: List[Tuple[str, str]] = []

    def add_peer(self, peer: "PeerUser") -> None:
        self.peers.append(peer)

    def mute(self, name: str) -> None:
        self.muted_users.append(name)

    def is_muted(self, name: str) -> bool:
        return name in self.muted_users

    def send(self, message: str) -> List[str]:
        """Broadcast to all peers that have not muted this user."""
        print(f"[{self.name} broadcasts]: {message}")
        delivered = []
        for peer in self.peers:
            if not peer.is_muted(self.name):
                peer.receive(self.name, message)
                delivered.append(peer.name)
        return delivered

    def send_to(self, target: "PeerUser", message: str) -> bool:
        print(f"[{self.name}→{target.name}]: {message}")
        if target.is_muted(self.name):
            return False
        target.receive(self.name, message)
        return True

    def receive(self, sender: str, message: str) -> None:
        self.inbox.append((sender, message))
        print(f"    {self.name} got from {sender}: {message}")