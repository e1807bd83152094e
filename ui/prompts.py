"""User interaction prompts"""

from abc import ABC, abstractmethod
from typing import Optional

from core.models import Form


class UserPrompt(ABC):
    """Abstract user prompt interface"""

    @abstractmethod
    async def yes_no(self, question: str) -> bool:
        """Ask yes/no question"""
        pass

    @abstractmethod
    async def select_form(self, forms: list[Form]) -> Optional[Form]:
        """Pick one form, or None when there is nothing to pick"""
        pass


class ConsolePrompt(UserPrompt):
    """Console-based user prompts"""

    async def yes_no(self, question: str) -> bool:
        """Ask yes/no question"""
        while True:
            response = input(f"{question} (Y/N): ").strip().upper()
            if response in ['Y', 'YES']:
                return True
            elif response in ['N', 'NO']:
                return False
            else:
                print("Please enter Y or N")

    async def select_form(self, forms: list[Form]) -> Optional[Form]:
        """Select form"""
        if not forms:
            print("No forms defined yet.")
            return None

        print("\nAvailable forms:")
        for i, form in enumerate(forms, 1):
            print(f"  {i}. {form.name} ({len(form.fields)} fields)")

        while True:
            try:
                choice = int(input(f"Select form (1-{len(forms)}): "))
                if 1 <= choice <= len(forms):
                    return forms[choice - 1]
                else:
                    print("Invalid choice")
            except ValueError:
                print("Please enter a number")
