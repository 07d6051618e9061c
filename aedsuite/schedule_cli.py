"""Interactive text menu over the class schedule and enrolment requests."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator
from typing import TextIO

from .enrolment import EnrolmentOffice
from .loader import read_classes, read_classes_per_uc, read_students
from .registry import Registry
from .timetable import SortOrder, format_lesson, sort_lessons

_RULE = "=============================================================="

DEFAULT_DATA_DIR = os.path.join("..", "schedule")


class _Quit(Exception):
    """Raised when the input runs out."""


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class ScheduleMenu:
    """Menu-driven access to schedules, student lists and class changes."""

    def __init__(
        self,
        registry: Registry,
        office: EnrolmentOffice,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self.office = office
        self._stdin = stdin
        self._stdout = stdout
        self._tokens: Iterator[str] | None = None

    # -- input and output -------------------------------------------------

    def _say(self, *lines: str) -> None:
        out = self._stdout if self._stdout is not None else sys.stdout
        for line in lines:
            out.write(line + "\n")

    def _token(self) -> str:
        if self._tokens is None:
            self._tokens = _words(self._stdin if self._stdin is not None else sys.stdin)
        try:
            return next(self._tokens)
        except StopIteration:
            raise _Quit from None

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        return self._token()

    def _number(self) -> int | None:
        try:
            return int(self._token())
        except ValueError:
            return None

    # -- flow -------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user leaves or the input ends."""
        try:
            while True:
                self.office.process_pending()
                if not self._main_menu():
                    break
        except _Quit:
            pass

    def _wait(self) -> bool:
        self._say(
            "Pressione 1 se quiser fazer alguma operacao com o seu horario",
            "Pressione 2 se quiser sair (o programa termina)",
        )
        return self._number() == 1

    def _after(self) -> bool:
        self._say("", "Pretende fazer mais alguma pesquisa?", "1 -> Yes", "2 -> No")
        if self._number() == 1:
            return True
        return self._wait()

    def _main_menu(self) -> bool:
        self._say(
            _RULE,
            "",
            "Bem Vindo",
            "",
            "1 -> Ver Horarios",
            "2 -> Ver Estudantes",
            "3 -> Efetuar Alteracoes",
            "4 -> Verificar se o pedido de ingressar numa turma foi aceite",
            "5 -> Sair",
            "",
            _RULE,
        )
        choice = self._number()
        if choice == 1:
            return self._schedules_menu()
        if choice == 2:
            return self._students_menu()
        if choice == 3:
            return self._changes_menu()
        if choice == 4:
            self._check_requests()
            return True
        return self._wait()

    def _ask_student(self) -> str:
        while True:
            code = self._ask("Introduza o seu up")
            if self.registry.student_exists(code):
                return code

    # -- schedules --------------------------------------------------------

    def _schedules_menu(self) -> bool:
        self._say(
            _RULE,
            "",
            "1 -> Ver o Horario de um Estudante.",
            "2 -> Ver o Horario de uma Turma",
            "3 -> Ver o Horario de uma Cadeira",
            "4 -> Ver o Horario de uma Cadeira, numa determinada Turma",
            "Outro numero -> Sair",
            "",
            _RULE,
        )
        choice = self._number()
        if choice == 1:
            lessons = self._student_schedule()
        elif choice == 2:
            lessons = self._class_schedule()
        elif choice == 3:
            lessons = self._uc_schedule()
        elif choice == 4:
            lessons = self._uc_class_schedule()
        else:
            return self._wait()
        self._show_schedule(lessons)
        return self._after()

    def _student_schedule(self):
        while True:
            code = self._ask("Introduza o numero de estudante:")
            if self.registry.student_exists(code):
                return self.registry.student_schedule(code)
            self._say("O numero que introduziu nao e valido")

    def _class_schedule(self):
        while True:
            class_code = self._ask("Introduza o numero da turma: ")
            if self.registry.class_exists(class_code):
                return self.registry.class_schedule(class_code)
            self._say("A turma que introduziu nao e valida")

    def _uc_schedule(self):
        while True:
            uc_code = self._ask("Introduza o numero da cadeira: ")
            if self.registry.uc_exists(uc_code):
                return self.registry.uc_schedule(uc_code)
            self._say("A cadeira que introduziu nao e valida")

    def _ask_uc_in_class(self) -> tuple[str, str]:
        while True:
            class_code = self._ask("Introduza a turma: ")
            if not self.registry.class_exists(class_code):
                self._say("A turma que introduziu nao existe")
                continue
            uc_code = self._ask("Introduza o codigo da cadeira: ")
            if not self.registry.uc_exists(uc_code):
                self._say("A cadeira que introduziu nao e valida")
            elif not self.registry.uc_in_class_exists(class_code, uc_code):
                self._say("A cadeira nao existe na turma")
            else:
                return uc_code, class_code

    def _uc_class_schedule(self):
        uc_code, class_code = self._ask_uc_in_class()
        return self.registry.uc_class_schedule(uc_code, class_code)

    def _show_schedule(self, lessons) -> None:
        self._say(
            "Como deseja ordenar o horario?",
            "1(default)-> ordem crescente",
            "2-> ordem decrescente",
            "3-> primeiro pelas aulas teoricas",
            "4-> pelo codigo da UC",
            "5-> pela duracao da aula",
        )
        order = self._number()
        for lesson in sort_lessons(lessons, SortOrder(order if order is not None else 1)):
            self._say(format_lesson(lesson))

    # -- student lists ----------------------------------------------------

    def _students_menu(self) -> bool:
        self._say(
            _RULE,
            "",
            "1 -> ver os estudantes de uma turma.",
            "2 -> ver os estudantes de uma cadeira",
            "3 -> ver os estudantes de uma cadeira, numa determinada turma",
            "4 -> ver os estudantes com mais de n cadeias",
            "5 -> ver os estudantes num determinado ano",
            "6-> Sair",
            "",
            _RULE,
        )
        choice = self._number()
        if choice == 1:
            self._students_in_class()
        elif choice == 2:
            self._students_in_uc()
        elif choice == 3:
            self._students_in_uc_class()
        elif choice == 4:
            self._students_with_more_ucs()
        elif choice == 5:
            self._students_in_year()
        else:
            return self._wait()
        return self._after()

    def _students_in_class(self) -> None:
        while True:
            class_code = self._ask("Introduza a turma: ")
            if self.registry.class_exists(class_code):
                break
            self._say("A turma que introduziu nao e valida")
        names = self.registry.students_in_class(class_code)
        self._say(f"A turma {class_code} tem {len(names)} alunos:", *names)

    def _students_in_uc(self) -> None:
        while True:
            uc_code = self._ask("Introduza a cadeira: ")
            if self.registry.uc_exists(uc_code):
                break
            self._say("A cadeira que introduziu nao e valida")
        names = self.registry.students_in_uc(uc_code)
        self._say(f"A cadeira {uc_code} tem {len(names)} alunos:", *names)

    def _students_in_uc_class(self) -> None:
        uc_code, class_code = self._ask_uc_in_class()
        names = self.registry.students_in_uc_class(uc_code, class_code)
        self._say(
            "",
            f"A cadeira {uc_code} da turma {class_code} tem {len(names)} alunos",
            *names,
        )

    def _students_with_more_ucs(self) -> None:
        self._say("Introduza o numero de cadeiras: ")
        n = self._number()
        if n is None:
            n = 0
        names = self.registry.students_with_more_ucs(n)
        if not names:
            self._say(f"Nao ha nenhum aluno com mais de {n} cadeiras.")
        else:
            self._say(f"Ha {len(names)} alunos com mais de {n} cadeiras: ", *names)

    def _students_in_year(self) -> None:
        while True:
            year = self._ask("Digite o ano que queira saber quantos alunos existem")[:1]
            if year in ("1", "2", "3"):
                break
            self._say("O ano que introduziu nao e valido")
        found = self.registry.students_in_year(year)
        self._say(f"Nesse ano existem {len(found)} alunos inscritos no curso:", "")
        self._say(*(f"{code}|{name}" for code, name in found))
        self._say("")

    # -- changes ----------------------------------------------------------

    def _changes_menu(self) -> bool:
        code = self._ask_student()
        self._say(
            _RULE,
            "",
            "1 -> sair de uma turma",
            "2 -> entrar numa turma",
            "3 -> modificar uma turma",
            "4 -> modificar varias turmas",
            "5-> Sair",
            "",
            _RULE,
        )
        choice = self._number()
        if choice == 1:
            return self._leave(code)
        if choice == 2:
            return self._join(code)
        if choice == 3:
            return self._change(code)
        if choice == 4:
            return self._change_several(code)
        return self._wait()

    def _leave(self, code: str) -> bool:
        while True:
            uc_code = self._ask("Introduza a cadeira: ")
            if self.registry.student_in_uc(code, uc_code):
                break
            self._say("O aluno nao esta inscrito na cadeira que introduziu")
        self.registry.leave_uc(code, uc_code)
        self._say(f"O aluno {code} foi removido da {uc_code}")
        return self._after()

    def _ask_offered(self, prompt: str) -> tuple[str, str]:
        while True:
            class_code = self._ask("Introduza a turma que deseja ingressar: ")
            if not self.registry.class_exists(class_code):
                self._say("A turma que introduziu nao existe")
                continue
            uc_code = self._ask(prompt)
            if not self.registry.uc_exists(uc_code):
                self._say("A cadeira nao existe")
                continue
            if not self.registry.class_offers_uc(uc_code, class_code):
                self._say("A turma que introduziu nao tem essa cadeira")
                continue
            return uc_code, class_code

    def _join(self, code: str) -> bool:
        while True:
            uc_code, class_code = self._ask_offered(
                "Introduza o codigo da cadeira que deseja ingressar: "
            )
            if self.registry.student_in_uc(code, uc_code):
                self._say(
                    "Ja esta inscrito nesta cadeira",
                    "",
                    "Deseja mudar de turma?",
                    "1->Sim",
                    "2->Nao e voltar ao menu principal",
                )
                if self._number() == 1:
                    return self._change(code)
                return self._wait()
            self.office.submit_join(code, uc_code, class_code)
            self._say(
                "O seu pedido foi registado, volte mais tarde e verifique se foi aceite ou nao.",
                "",
                "Deseja juntar-se a mais alguma turma?",
                "1->Sim",
                "2->Nao, mas desejo trocar uma turma atual",
                "3->Nao e voltar ao menu principal",
                "Outro->Nao e sair",
            )
            choice = self._number()
            if choice == 1:
                continue
            if choice == 2:
                return self._change(code)
            if choice == 3:
                return True
            return self._wait()

    def _change(self, code: str) -> bool:
        while True:
            class_code = self._ask("Introduza a turma que deseja ingressar: ")
            if not self.registry.class_exists(class_code):
                self._say("A turma que introduziu nao existe")
                continue
            uc_code = self._ask("Introduza o codigo da cadeira: ")
            if not self.registry.uc_exists(uc_code):
                self._say("A cadeira nao existe")
                continue
            if not self.registry.student_in_uc(code, uc_code):
                self._say(
                    "Nao esta inscrito nessa cadeira",
                    "",
                    "Deseja ingressar numa turma com essa cadeira?",
                    "1->Sim",
                    "2->Nao, voltar ao Menu principal",
                )
                if self._number() == 1:
                    return self._join(code)
                return True
            if not self.registry.class_offers_uc(uc_code, class_code):
                self._say("A turma que introduziu nao tem essa cadeira")
                continue
            break
        self.office.submit_change(code, uc_code, class_code)
        self._say(
            "O seu pedido foi registado, volte mais tarde e verifique se foi aceite ou nao.",
            "",
        )
        return self._after()

    def _change_several(self, code: str) -> bool:
        changes: list[tuple[str, str]] = []
        while True:
            uc_code, class_code = self._ask_offered("Introduza o codigo da cadeira: ")
            if not self.registry.student_in_uc(code, uc_code):
                self._say("Nao esta inscrito nessa cadeira")
                continue
            changes.append((uc_code, class_code))
            self._say(
                "Deseja adicionar mais algum pedido de troca de turma?",
                "",
                "1->Sim",
                "2->Nao",
            )
            if self._number() != 1:
                break
        self.office.submit_changes(code, changes)
        self._say(
            "O seu pedido foi registado, volte mais tarde e verifique se foi aceite ou nao.",
            "",
        )
        return self._after()

    def _check_requests(self) -> None:
        code = self._ask_student()
        rejected = self.office.rejected_count(code)
        pending = self.office.pending_count(code)
        if rejected > 0:
            self._say(f"{rejected} dos seus pedidos nao puderam ser validados")
        if pending > 0:
            self._say(
                f"{pending} dos seus pedidos ainda esta(ao) a espera de ser processado(s)"
            )
        if rejected == 0 and pending == 0:
            self._say("Todos os seus pedidos foram processados com exito ")
        else:
            self._say("O resto dos seus pedidos foram processados com exito")


def main(argv: list[str] | None = None) -> int:
    """Load the schedule files and run the interactive menu."""
    parser = argparse.ArgumentParser(description="Class schedule and enrolment menu.")
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=DEFAULT_DATA_DIR,
        help="directory holding classes.csv, students_classes.csv and classes_per_uc.csv",
    )
    parser.add_argument("--max-capacity", type=int, default=23)
    args = parser.parse_args(argv)
    registry = Registry(
        read_classes(os.path.join(args.data_dir, "classes.csv")),
        read_students(os.path.join(args.data_dir, "students_classes.csv")),
        read_classes_per_uc(os.path.join(args.data_dir, "classes_per_uc.csv")),
    )
    office = EnrolmentOffice(registry, args.max_capacity)
    ScheduleMenu(registry, office).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())