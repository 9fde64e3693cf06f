"""
Placement Questions - ngân hàng câu hỏi xếp lớp (dữ liệu tĩnh)

Mỗi bậc CEFR có 6 câu. Thứ tự khai báo được giữ nguyên khi tra cứu.
"""

from typing import List

from models.assessment_item import AssessmentItem
from models.cefr_level import CEFRLevel, Skill

PLACEMENT_QUESTIONS: List[AssessmentItem] = [
    # A1 - Elementary
    AssessmentItem(
        id="a1_1",
        text="She _____ from Mexico.",
        options=("is", "are", "am", "be"),
        correct_option_index=0,
        difficulty=CEFRLevel.A1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a1_2",
        text="I _____ coffee every morning.",
        options=("drink", "drinks", "drinking", "drank"),
        correct_option_index=0,
        difficulty=CEFRLevel.A1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a1_3",
        text="_____ are you from?",
        options=("Where", "What", "Who", "When"),
        correct_option_index=0,
        difficulty=CEFRLevel.A1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a1_4",
        text="My brother _____ 25 years old.",
        options=("is", "have", "has", "are"),
        correct_option_index=0,
        difficulty=CEFRLevel.A1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a1_5",
        text="They _____ students at the university.",
        options=("are", "is", "am", "be"),
        correct_option_index=0,
        difficulty=CEFRLevel.A1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a1_6",
        text="I _____ a teacher. I work at a school.",
        options=("am", "is", "are", "be"),
        correct_option_index=0,
        difficulty=CEFRLevel.A1,
        skill=Skill.GRAMMAR,
    ),

    # A2 - Pre-Intermediate
    AssessmentItem(
        id="a2_1",
        text="I _____ to the cinema last night.",
        options=("went", "go", "going", "gone"),
        correct_option_index=0,
        difficulty=CEFRLevel.A2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a2_2",
        text="She _____ dinner when the phone rang.",
        options=("was cooking", "cooked", "cooks", "is cooking"),
        correct_option_index=0,
        difficulty=CEFRLevel.A2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a2_3",
        text="I have _____ been to Paris. It's beautiful!",
        options=("already", "yet", "still", "never"),
        correct_option_index=0,
        difficulty=CEFRLevel.A2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a2_4",
        text="There isn't _____ milk in the fridge.",
        options=("any", "some", "a", "the"),
        correct_option_index=0,
        difficulty=CEFRLevel.A2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a2_5",
        text="My car is _____ than yours.",
        options=("faster", "more fast", "most fast", "fastest"),
        correct_option_index=0,
        difficulty=CEFRLevel.A2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="a2_6",
        text="You _____ study harder if you want to pass the exam.",
        options=("should", "can", "may", "might"),
        correct_option_index=0,
        difficulty=CEFRLevel.A2,
        skill=Skill.GRAMMAR,
    ),

    # B1 - Intermediate
    AssessmentItem(
        id="b1_1",
        text="If I _____ more money, I would buy a new car.",
        options=("had", "have", "has", "having"),
        correct_option_index=0,
        difficulty=CEFRLevel.B1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b1_2",
        text="She asked me where I _____.",
        options=("lived", "live", "am living", "living"),
        correct_option_index=0,
        difficulty=CEFRLevel.B1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b1_3",
        text="The book _____ by millions of people around the world.",
        options=("has been read", "has read", "is reading", "reads"),
        correct_option_index=0,
        difficulty=CEFRLevel.B1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b1_4",
        text="I wish I _____ speak French fluently.",
        options=("could", "can", "would", "should"),
        correct_option_index=0,
        difficulty=CEFRLevel.B1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b1_5",
        text="By the time we arrived, the movie _____.",
        options=("had already started", "already started", "has already started", "is starting"),
        correct_option_index=0,
        difficulty=CEFRLevel.B1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b1_6",
        text="She _____ working here for five years next month.",
        options=("will have been", "has been", "is", "was"),
        correct_option_index=0,
        difficulty=CEFRLevel.B1,
        skill=Skill.GRAMMAR,
    ),

    # B2 - Upper
    AssessmentItem(
        id="b2_1",
        text="If I had known about the problem, I _____ something about it.",
        options=("would have done", "would do", "will do", "had done"),
        correct_option_index=0,
        difficulty=CEFRLevel.B2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b2_2",
        text="The manager insisted _____ the report by Friday.",
        options=("on having", "to have", "having", "for having"),
        correct_option_index=0,
        difficulty=CEFRLevel.B2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b2_3",
        text="Not only _____ late, but he also forgot to bring the documents.",
        options=("was he", "he was", "did he be", "he is"),
        correct_option_index=0,
        difficulty=CEFRLevel.B2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b2_4",
        text="She would rather you _____ tell anyone about the surprise party.",
        options=("didn't", "don't", "won't", "wouldn't"),
        correct_option_index=0,
        difficulty=CEFRLevel.B2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b2_5",
        text="_____ the rain, we decided to go ahead with the picnic.",
        options=("Despite", "Although", "Even", "However"),
        correct_option_index=0,
        difficulty=CEFRLevel.B2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="b2_6",
        text="The more you practice, _____ you will become.",
        options=("the better", "better", "the best", "more better"),
        correct_option_index=0,
        difficulty=CEFRLevel.B2,
        skill=Skill.GRAMMAR,
    ),

    # C1 - Advanced
    AssessmentItem(
        id="c1_1",
        text="Had it not been for her quick thinking, the situation _____ much worse.",
        options=("could have been", "would be", "could be", "had been"),
        correct_option_index=0,
        difficulty=CEFRLevel.C1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c1_2",
        text="The proposal was turned down _____ grounds that it was too expensive.",
        options=("on the", "in the", "at the", "by the"),
        correct_option_index=0,
        difficulty=CEFRLevel.C1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c1_3",
        text="She gave _____ impression of being completely unaware of the situation.",
        options=("every", "all", "any", "some"),
        correct_option_index=0,
        difficulty=CEFRLevel.C1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c1_4",
        text="Under no circumstances _____ leave the building without permission.",
        options=("should you", "you should", "could you", "you could"),
        correct_option_index=0,
        difficulty=CEFRLevel.C1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c1_5",
        text="The research findings _____ be published by the end of the year.",
        options=("are due to", "are bound to", "are likely", "are about"),
        correct_option_index=0,
        difficulty=CEFRLevel.C1,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c1_6",
        text="Were it not for the scholarship, she _____ afford to attend university.",
        options=("would not be able to", "will not be able to", "is not able to", "was not able to"),
        correct_option_index=0,
        difficulty=CEFRLevel.C1,
        skill=Skill.GRAMMAR,
    ),

    # C2 - Proficient
    AssessmentItem(
        id="c2_1",
        text="The politician's speech was so full of _____ that nobody could understand his actual position.",
        options=("circumlocution", "brevity", "clarity", "concision"),
        correct_option_index=0,
        difficulty=CEFRLevel.C2,
        skill=Skill.VOCABULARY,
    ),
    AssessmentItem(
        id="c2_2",
        text="His argument, _____ sound on the surface, failed to address the underlying issues.",
        options=("albeit", "despite", "although", "whereas"),
        correct_option_index=0,
        difficulty=CEFRLevel.C2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c2_3",
        text="The new regulations have _____ far-reaching implications for the industry.",
        options=("ostensibly", "manifestly", "purportedly", "seemingly"),
        correct_option_index=0,
        difficulty=CEFRLevel.C2,
        skill=Skill.VOCABULARY,
    ),
    AssessmentItem(
        id="c2_4",
        text="Little _____ that his decision would lead to such controversy.",
        options=("did he realize", "he realized", "he did realize", "realized he"),
        correct_option_index=0,
        difficulty=CEFRLevel.C2,
        skill=Skill.GRAMMAR,
    ),
    AssessmentItem(
        id="c2_5",
        text="The _____ nature of the negotiations made it difficult to predict the outcome.",
        options=("protracted", "abbreviated", "curtailed", "truncated"),
        correct_option_index=0,
        difficulty=CEFRLevel.C2,
        skill=Skill.VOCABULARY,
    ),
    AssessmentItem(
        id="c2_6",
        text="The scientist's hypothesis, _____ initially met with skepticism, has since been validated.",
        options=("which was", "that was", "being", "having been"),
        correct_option_index=0,
        difficulty=CEFRLevel.C2,
        skill=Skill.GRAMMAR,
    ),
]
