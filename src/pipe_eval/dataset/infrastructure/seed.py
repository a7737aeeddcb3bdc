"""Built-in demo datasets a fresh session starts with."""

from pipe_eval.dataset.domain.case import TestCase
from pipe_eval.dataset.domain.dataset import Dataset
from pipe_eval.dataset.domain.process import PipefyProcess


def seed_datasets() -> list[Dataset]:
    return [
        Dataset(
            id="d1",
            name="IT Service Desk - Ticket Classification",
            process=PipefyProcess.IT_HELPDESK,
            description=(
                'Test set for "Input Phase" in IT Service Desk. Verifies if the AI '
                "correctly assigns categories and urgency based on description."
            ),
            agent_context=(
                'Strict rules: "Server Down" is always Critical. '
                '"Reset Password" is Low priority/Access category.'
            ),
            cases=(
                TestCase(
                    id="c1",
                    input=(
                        "My laptop screen is completely black and I have a client "
                        "meeting in 10 mins!"
                    ),
                    expected_output="Field: Urgency = Critical; Field: Category = Hardware",
                ),
                TestCase(
                    id="c2",
                    input="I need to install VS Code for the new intern.",
                    expected_output=(
                        "Field: Urgency = Low; Field: Category = Software Request"
                    ),
                ),
                TestCase(
                    id="c3",
                    input="The wifi on the 3rd floor is spotty.",
                    expected_output="Field: Urgency = Medium; Field: Category = Network",
                ),
                TestCase(
                    id="c4",
                    input="Password reset for Jira.",
                    expected_output="Field: Urgency = Low; Field: Category = Access",
                ),
                TestCase(
                    id="c5",
                    input="My keyboard coffee spill.",
                    expected_output="Field: Urgency = High; Field: Category = Hardware",
                ),
            ),
        ),
        Dataset(
            id="d2",
            name="Sales Pipeline - Lead Qualification",
            process=PipefyProcess.SALES_PIPELINE,
            description=(
                'Test set for "Qualification Phase". Verifies extraction of budget '
                "and timeline from initial email inquiries."
            ),
            cases=(
                TestCase(
                    id="s1",
                    input="Hi, we have a budget of $50k and need this by Q3.",
                    expected_output=(
                        "Field: Budget = $50,000; Field: Timeline = Q3; "
                        "Field: Lead Score = High"
                    ),
                ),
                TestCase(
                    id="s2",
                    input="Looking to explore options, no rush.",
                    expected_output=(
                        "Field: Budget = Unknown; Field: Timeline = Flexible; "
                        "Field: Lead Score = Low"
                    ),
                ),
            ),
        ),
    ]
