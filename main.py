"""
IndustryJobs - CLI Entry Point.

Drives one app context from the terminal: sign in, move between pages and
watch what the guard lets through.
"""

import logging

from dotenv import load_dotenv

load_dotenv()

from jobboard.auth import Role, identity_provider
from jobboard.config import settings
from jobboard.db import get_session_factory, init_db
from jobboard.errors import JobBoardError
from jobboard.navigation.views import compose_shell, header_links
from jobboard.search import JobCriteria
from jobboard.services.jobs import search_jobs
from jobboard.session import AppContext

HELP = """Commands:
  /signin <email> <password>
  /signup <seeker|employer> <email> <password> <name...>
  /signout
  /go <page> [job_id]     e.g. /go dashboard, /go job-detail 1234
  /open <path>            e.g. /open /employer/post-job
  /back, /forward
  /jobs [text]
  /whoami
  /quit"""


def show(context: AppContext):
    state = context.navigator.state
    view = compose_shell(context, state)
    links = " | ".join(link.label for link in header_links(context.auth_state))
    print(f"[{context.status.value}] {view.path} -> {view.name}")
    if view.message:
        print(f"  {view.message}")
    if view.show_chrome:
        print(f"  {links}")


def main():
    """Run the job board CLI."""
    print("IndustryJobs")
    print("=" * 40)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("\nInitializing...")
    try:
        init_db()
    except ValueError:
        print("Error: DATABASE_URL not set (try sqlite:///jobboard.db)")
        return

    session_factory = get_session_factory()
    context = AppContext(identity_provider, session_factory).load(None)
    print("Ready!\n")
    print(HELP)
    print("-" * 40)
    show(context)

    while True:
        try:
            user_input = input("> ").strip()
            if not user_input:
                continue

            command, *args = user_input.split()
            command = command.lower()

            if command == "/quit":
                break
            elif command == "/help":
                print(HELP)
                continue
            elif command == "/signin" and len(args) == 2:
                context.sign_in(args[0], args[1])
            elif command == "/signup" and len(args) >= 4:
                context.sign_up(args[1], args[2], Role(args[0]), " ".join(args[3:]))
            elif command == "/signout":
                context.sign_out()
            elif command == "/go" and args:
                params = {"job_id": args[1]} if len(args) > 1 else {}
                context.navigator.navigate(args[0], params)
            elif command == "/open" and args:
                context.navigator.on_external_navigation(args[0])
            elif command == "/back":
                if context.navigator.back() is None:
                    print("Nothing to go back to")
            elif command == "/forward":
                if context.navigator.forward() is None:
                    print("Nothing to go forward to")
            elif command == "/jobs":
                with session_factory() as db:
                    jobs = search_jobs(db, JobCriteria(text=" ".join(args) or None))
                    for job in jobs:
                        print(f"  {job.id}  {job.title} ({job.location}, {job.job_type})")
                    print(f"{len(jobs)} job(s)")
                continue
            elif command == "/whoami":
                if context.identity is None:
                    print("Not signed in")
                else:
                    role = context.role.value if context.role else "unknown"
                    print(f"{context.identity.email} ({role})")
                continue
            else:
                print(f"Unknown command: {user_input}")
                continue

            show(context)

        except JobBoardError as e:
            print(f"Error: {e.message}")
        except ValueError as e:
            print(f"Error: {e}")
        except (KeyboardInterrupt, EOFError):
            break

    context.close()
    print("Goodbye!")


if __name__ == "__main__":
    main()
