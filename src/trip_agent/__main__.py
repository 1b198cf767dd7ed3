"""
Main entry point for the trip agent console chat.
"""

from langchain_core.messages import AIMessage

from .config.settings import validate_api_keys, logging
from .core.agent import ChatAgent

def display_reply(message) -> None:
    """Prints the agent's reply, flattening list content."""
    if not isinstance(message, AIMessage):
        return
    content = message.content
    if isinstance(content, list):
        content = " ".join(
            item if isinstance(item, str) else item.get("text", "")
            for item in content
            if isinstance(item, (str, dict))
        )
    if content:
        print(f"\nTrip Agent: {content}")

def ask_for_confirmation(pending) -> bool:
    """Asks the user whether the pending tool calls may run."""
    print("\nThe assistant wants to run:")
    for call in pending:
        print(f"- {call['name']}({call.get('args', {})})")
    answer = input("Allow? [y/N]: ").strip().lower()
    return answer in ("y", "yes")

def main():
    """Main entry point for the trip agent application."""
    print("--- Trip Agent: plan trips, get map links, schedule reminders ---")
    print("Try: 'Plan a trip to Japan from 2024-05-01 to 2024-05-04 with Sam, we love food.'")
    print("Type 'exit' or 'quit' to leave.")

    if not validate_api_keys():
        print("\nWarning: some API keys are missing. Set GEMINI_API_KEY, SENDGRID_EMAIL_API and SENDER_EMAIL.")

    agent = ChatAgent()
    if agent.app is None:
        print("\nError: Failed to initialize the agent workflow.")
        return

    while True:
        try:
            display_reply(agent.run_due_tasks())

            user_input = input("\nYou: ")
            if user_input.strip().lower() in ["exit", "quit"]:
                print("Safe travels!")
                break
            if not user_input.strip():
                continue

            reply = agent.send(user_input)
            while agent.pending_confirmations:
                reply = agent.confirm(ask_for_confirmation(agent.pending_confirmations))

            display_reply(reply)

            if agent.error_message:
                print(f"\nHeads up: There was an issue: {agent.error_message}")

        except (KeyboardInterrupt, EOFError):
            print("\nSafe travels!")
            break
        except Exception as e:
            logging.error(f"Unexpected error in chat loop: {e}", exc_info=True)
            print(f"\nSorry, something went wrong: {e}")

if __name__ == "__main__":
    main()
