from __future__ import annotations

from typing import Callable, Dict, Optional

from rich.console import Console

from famtree.config import DisplaySettings, get_config
from famtree.core.exceptions import FamilyTreeError
from famtree.logging import get_logger
from famtree.registry import AddMemberRequest, Gender, MemberRegistry, NewParent, add_member
from famtree.registry.add_member import ParentRef
from famtree.render import render_tree
from famtree.cli.prompts import ConsolePrompter

log = get_logger(__name__)

BANNER = "===== CENTERED FAMILY TREE SYSTEM ====="
MENU_TEXT = (
    "1. Create Root Ancestor\n"
    "2. Add Member\n"
    "3. Mark Member as Late\n"
    "4. Show Centered Tree\n"
    "5. List All Members\n"
    "0. Exit"
)


class Menu:
    """
    Menu dispatch loop for one tree session.

    Collects answers through the prompter, hands validated values to the
    registry, and reports any FamilyTreeError as a one-line message.
    """

    def __init__(
        self,
        registry: MemberRegistry,
        prompter: ConsolePrompter,
        console: Optional[Console] = None,
        settings: Optional[DisplaySettings] = None,
    ):
        self.registry = registry
        self.prompter = prompter
        self.console = console or prompter.console
        self.settings = settings or get_config().display_settings()

        self.actions: Dict[int, Callable[[], None]] = {
            1: self.create_root,
            2: self.add_member,
            3: self.mark_late,
            4: self.show_tree,
            5: self.list_members,
        }

    # ---------------------------------------------------------
    # Output
    # ---------------------------------------------------------
    def say(self, text: str = "") -> None:
        # Member names are user text; never treat them as markup.
        self.console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def _report(self, exc: FamilyTreeError) -> None:
        log.info(f"{type(exc).__name__}: {exc}")
        self.say(str(exc))

    # ---------------------------------------------------------
    # 1. Create root
    # ---------------------------------------------------------
    def create_root(self) -> None:
        if self.registry.has_root():
            self.say("Root already exists.")
            return

        name = self.prompter.read_name("Enter root ancestor full name")
        if not name.strip():
            self.say("Empty name. Aborted.")
            return
        gender = self.prompter.read_gender("Enter gender (M/F)")
        alive = self.prompter.read_yes_no("Is ancestor alive?", default=True)

        try:
            root = self.registry.create_root(name, gender, alive)
        except FamilyTreeError as exc:
            self._report(exc)
            return
        self.say(f"Root '{root.name}' created.")

    # ---------------------------------------------------------
    # 2. Add member
    # ---------------------------------------------------------
    def _ask_parent(
        self,
        role: str,
        prompt: str,
        *,
        confirm_create: bool = True,
    ) -> ParentRef:
        """
        Ask for one parent.

        Returns the name of an existing member, a NewParent to be created
        when the member is committed, or None for an unknown parent.
        """
        name = self.prompter.read_name(prompt)
        if not name.strip():
            return None
        if self.registry.get_by_name(name) is not None:
            return name

        title = role.capitalize()
        if confirm_create and not self.prompter.read_yes_no(
            f"{title} not found. Create {role} now?"
        ):
            return None

        gender = self.prompter.read_gender(f"Enter {role}'s gender (M/F)")
        alive = self.prompter.read_yes_no(f"Is {role} alive?", default=True)
        return NewParent(name=name, gender=gender, alive=alive)

    def _ask_missing_parent(self, role: str) -> ParentRef:
        if not self.prompter.read_yes_no(
            f"{role.capitalize()} missing. Create/set {role} now?"
        ):
            return None
        return self._ask_parent(role, f"Enter {role}'s name", confirm_create=False)

    def add_member(self) -> None:
        if not self.registry.has_root():
            self.say("Create root first (option 1).")
            return

        name = self.prompter.read_name("Enter new member full name")
        if not name.strip():
            self.say("Empty name. Aborted.")
            return
        if self.registry.get_by_name(name) is not None:
            self.say("Member already exists. Aborted.")
            return

        gender = self.prompter.read_gender("Enter gender (M/F)")
        alive = self.prompter.read_yes_no("Is person alive?", default=True)

        father: ParentRef = None
        mother: ParentRef = None
        if self.prompter.read_yes_no("Do you want to specify parents for this member?"):
            father = self._ask_parent("father", "Enter father's name (or blank if unknown)")
            mother = self._ask_parent("mother", "Enter mother's name (or blank if unknown)")

            if father is not None and mother is None:
                mother = self._ask_missing_parent("mother")
            elif mother is not None and father is None:
                father = self._ask_missing_parent("father")

        request = AddMemberRequest(
            name=name,
            gender=gender,
            alive=alive,
            father=father,
            mother=mother,
        )
        try:
            result = add_member(self.registry, request)
        except FamilyTreeError as exc:
            self._report(exc)
            return

        if isinstance(father, NewParent):
            self.say("Father created and attached under root for visibility.")
        if isinstance(mother, NewParent):
            self.say("Mother created and attached under root for visibility.")
        if result.father is None and result.mother is None:
            self.say("No parents specified; member attached under root for visibility.")
        self.say(f"Member '{result.member.name}' added successfully.")

    # ---------------------------------------------------------
    # 3. Mark deceased
    # ---------------------------------------------------------
    def mark_late(self) -> None:
        if not self.registry.has_root():
            self.say("No tree exists.")
            return

        name = self.prompter.read_name("Enter member name to mark as Late")
        if not name.strip():
            self.say("Empty name.")
            return

        person = self.registry.get_by_name(name)
        if person is None:
            self.say("Member not found.")
            return
        if not person.alive:
            self.say("Already marked Late.")
            return

        if not self.prompter.read_yes_no(f"Confirm marking '{person.name}' as Late?"):
            self.say("Cancelled.")
            return

        try:
            self.registry.mark_deceased(person.name)
        except FamilyTreeError as exc:
            self._report(exc)
            return
        self.say("Marked Late.")

    # ---------------------------------------------------------
    # 4. Show tree / 5. List members
    # ---------------------------------------------------------
    def show_tree(self) -> None:
        if not self.registry.has_root():
            self.say("No tree. Create root first.")
            return
        self.say()
        self.say(render_tree(self.registry, self.settings))

    def list_members(self) -> None:
        self.say()
        self.say("All members:")
        for person in self.registry.all_members():
            self.say(f"- {person.name}")

    # ---------------------------------------------------------
    # Loop
    # ---------------------------------------------------------
    def run(self) -> None:
        self.say(BANNER)
        while True:
            try:
                self.say()
                self.say(MENU_TEXT)
                choice = self.prompter.read_choice("Enter choice")
                if choice == 0:
                    self.say("Exiting...")
                    break

                action = self.actions.get(choice)
                if action is None:
                    self.say("Invalid choice.")
                    continue
                action()
            except (EOFError, KeyboardInterrupt):
                log.debug("Input closed; leaving menu")
                self.say()
                self.say("Exiting...")
                break
