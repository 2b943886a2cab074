"""
Manual smoke check of the generation service (needs OPENAI_API_KEY).
"""
from ai_tutor.core.agents.tutor.generator import TutorGenerator


def check_generation() -> None:
    """Exercise each generation operation once."""
    generator = TutorGenerator()

    print("Generating curriculum...")
    curriculum = generator.generate_curriculum("Python", "Write small automation scripts")
    print(f"Generated {len(curriculum.sections)} sections, duration {curriculum.estimated_duration}")

    print("\n" + "="*50)
    print("Generating quiz...")
    questions = generator.generate_quiz("Python", "easy")
    for i, q in enumerate(questions, 1):
        print(f"\nQ{i}: {q.question}")
        print(f"A: {q.options[q.correct_answer]}")

    print("\n" + "="*50)
    print("Testing chat...")
    reply = generator.get_tutor_response("What is a list comprehension?", "Python", [])
    print(f"Response: {reply}")


if __name__ == "__main__":
    check_generation()
