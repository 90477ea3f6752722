"""
Interactive console front end for an ER session.

All pacing lives here; the session and the triage core never sleep.
"""
import time

from triage import UnknownInjury
from utils.logger import logger

class ConsoleFrontend:
    """
    Prompts for admissions, shows the queue and the treated log.

    Args:
        session: ERSession to drive
        input_fn: prompt function (defaults to builtin input)
        pacing_seconds: delay after each displayed line
        sleep_fn: delay function (defaults to time.sleep)
    """

    def __init__(self, session, input_fn=input, pacing_seconds=0.0, sleep_fn=time.sleep):
        self.session = session
        self.input_fn = input_fn
        self.pacing_seconds = pacing_seconds
        self.sleep_fn = sleep_fn

    def _say(self, message):
        logger.info(message)
        self._pause()

    def _pause(self):
        if self.pacing_seconds > 0:
            self.sleep_fn(self.pacing_seconds)

    # ==== Prompts ====

    def ask_yes_no(self, question):
        while True:
            choice = self.input_fn(question).strip().lower()
            if choice in ('y', 'n'):
                return choice == 'y'
            logger.info("Invalid input. Please enter 'y' or 'n'.")

    def choose_injury(self):
        """Shows the numbered injury menu and returns the chosen injury name."""
        injuries = self.session.severity_table.injuries()
        logger.info("Select an injury from the following options:")
        for i, injury in enumerate(injuries, start=1):
            logger.info(f"{i}. {injury}")

        while True:
            raw = self.input_fn("Enter the number corresponding to the injury: ").strip()
            try:
                choice = int(raw)
            except ValueError:
                choice = 0
            if 1 <= choice <= len(injuries):
                return injuries[choice - 1]
            logger.info(f"Invalid input. Please enter a number between 1 and {len(injuries)}.")

    def prompt_for_new_patient(self):
        """
        Asks whether to admit a new patient and admits them if so.

        Returns:
            bool: True if a patient was admitted
        """
        if not self.ask_yes_no("Do you want to admit a new patient? (y/n): "):
            return False

        name = self.input_fn("Enter the name of the new patient: ").strip()
        injury = self.choose_injury()
        try:
            self.session.admit(name, injury)
        except UnknownInjury as e:
            # Only reachable if the menu and the queue were given different tables
            logger.error(f"  -> [Error] {e}")
            return False
        self._pause()
        return True

    # ==== Displays ====

    def show_queue_status(self):
        rows = self.session.queue_rows()
        if not rows:
            self._say("Queue is empty. All good here!")
            return
        self._say("=== Current ER Queue ===")
        for row in rows:
            self._say(f"Patient: {row['name']}, Injury: {row['injury']}, "
                      f"Severity: {row['severity']}, Check-in: {row['check_in']}")
        self._say("=========================")

    def show_treated_log(self):
        rows = self.session.treated_rows()
        if not rows:
            self._say("No patients have been treated yet.")
            return
        self._say("=== Treated Patients Log ===")
        for row in rows:
            flag = " [clock anomaly]" if row['clock_anomaly'] else ""
            self._say(f"Patient: {row['name']}, Injury: {row['injury']}, "
                      f"Severity: {row['severity']}, Waiting Time: {row['wait_minutes']} minutes{flag}")
        self._say("=============================")

    # ==== Main loop ====

    def run(self, seed_patients=()):
        """
        Seeds the queue, then alternates admission prompts and treatments
        until nobody is waiting, then shows the treated log.
        """
        self._say("Emergency Room Simulation Starting...")
        if seed_patients:
            for _ in self.session.seed(seed_patients):
                self._pause()

        self.show_queue_status()

        while not self.session.is_empty():
            if self.prompt_for_new_patient():
                self.show_queue_status()
            self.session.treat_next()
            self._pause()

        self.show_treated_log()
        self._say("Simulation Complete.")
