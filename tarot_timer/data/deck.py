"""Static tarot deck data.

Each row is ``(id, name_en, name_ko, description_en, description_ko,
keywords_en, keywords_ko, element)``. Major arcana rows are ordered 0..21;
each suit's rows are ordered Ace..King (rank 1..14).
"""

MAJOR_ARCANA = (
    ("the-fool", "The Fool", "바보",
     "New beginnings, innocence, spontaneity", "새로운 시작과 순수한 마음",
     ("new beginnings", "innocence", "spontaneity", "free spirit"),
     ("새로운 시작", "순수함", "모험", "가능성"), "air"),
    ("the-magician", "The Magician", "마법사",
     "Manifestation, resourcefulness, power", "의지력과 창조적 능력",
     ("manifestation", "resourcefulness", "power", "inspired action"),
     ("의지력", "창조력", "집중", "기술"), "air"),
    ("the-high-priestess", "The High Priestess", "여사제",
     "Intuition, sacred knowledge, divine feminine", "직관과 내면의 지혜",
     ("intuition", "sacred knowledge", "divine feminine", "the subconscious mind"),
     ("직관", "지혜", "내면", "신비"), "water"),
    ("the-empress", "The Empress", "여황제",
     "Femininity, beauty, nature, abundance", "풍요로움과 어머니의 사랑",
     ("femininity", "beauty", "nature", "abundance"),
     ("풍요", "창조", "자연", "사랑"), "earth"),
    ("the-emperor", "The Emperor", "황제",
     "Authority, establishment, structure, father figure", "권위와 안정적인 구조",
     ("authority", "establishment", "structure", "father figure"),
     ("권위", "질서", "안정", "리더십"), "fire"),
    ("the-hierophant", "The Hierophant", "교황",
     "Spiritual wisdom, religious beliefs, conformity", "전통과 영적 지도",
     ("spiritual wisdom", "religious beliefs", "conformity", "tradition"),
     ("전통", "영성", "지도", "학습"), "earth"),
    ("the-lovers", "The Lovers", "연인",
     "Love, harmony, relationships, values alignment", "사랑과 선택의 갈래",
     ("love", "harmony", "relationships", "values alignment"),
     ("사랑", "선택", "조화", "결합"), "air"),
    ("the-chariot", "The Chariot", "전차",
     "Control, willpower, success, determination", "의지력과 승리",
     ("control", "willpower", "success", "determination"),
     ("승리", "의지", "전진", "통제"), "water"),
    ("strength", "Strength", "힘",
     "Strength, courage, persuasion, influence", "내면의 힘과 용기",
     ("strength", "courage", "persuasion", "influence"),
     ("힘", "용기", "인내", "극복"), "fire"),
    ("the-hermit", "The Hermit", "은자",
     "Soul searching, introspection, inner guidance", "내적 성찰과 고독",
     ("soul searching", "introspection", "inner guidance", "solitude"),
     ("성찰", "고독", "내면", "깨달음"), "earth"),
    ("wheel-of-fortune", "Wheel of Fortune", "운명의 바퀴",
     "Good luck, karma, life cycles, destiny", "변화와 운명의 순환",
     ("good luck", "karma", "life cycles", "destiny"),
     ("변화", "운명", "기회", "순환"), "fire"),
    ("justice", "Justice", "정의",
     "Justice, fairness, truth, cause and effect", "균형과 공정함",
     ("justice", "fairness", "truth", "cause and effect"),
     ("정의", "균형", "공정", "진실"), "air"),
    ("the-hanged-man", "The Hanged Man", "매달린 사람",
     "Suspension, restriction, letting go", "희생과 새로운 관점",
     ("suspension", "restriction", "letting go", "sacrifice"),
     ("희생", "관점", "깨달음", "인내"), "water"),
    ("death", "Death", "죽음",
     "Endings, beginnings, change, transformation", "변화와 재생",
     ("endings", "beginnings", "change", "transformation"),
     ("변화", "재생", "끝", "새로운 시작"), "water"),
    ("temperance", "Temperance", "절제",
     "Balance, moderation, patience, purpose", "조화와 균형",
     ("balance", "moderation", "patience", "purpose"),
     ("절제", "조화", "균형", "평화"), "fire"),
    ("the-devil", "The Devil", "악마",
     "Shadow self, attachment, addiction, restriction", "유혹과 속박",
     ("shadow self", "attachment", "addiction", "restriction"),
     ("유혹", "속박", "해방", "진실"), "earth"),
    ("the-tower", "The Tower", "탑",
     "Sudden change, upheaval, chaos, revelation", "충격과 깨달음",
     ("sudden change", "upheaval", "chaos", "revelation"),
     ("충격", "깨달음", "파괴", "각성"), "fire"),
    ("the-star", "The Star", "별",
     "Hope, faith, purpose, renewal, spirituality", "희망과 영감",
     ("hope", "faith", "purpose", "renewal", "spirituality"),
     ("희망", "영감", "치유", "꿈"), "air"),
    ("the-moon", "The Moon", "달",
     "Illusion, fear, anxiety, subconscious, intuition", "환상과 무의식",
     ("illusion", "fear", "anxiety", "subconscious", "intuition"),
     ("환상", "무의식", "직감", "신비"), "water"),
    ("the-sun", "The Sun", "태양",
     "Positivity, fun, warmth, success, vitality", "성공과 기쁨",
     ("positivity", "fun", "warmth", "success", "vitality"),
     ("성공", "기쁨", "활력", "긍정"), "fire"),
    ("judgement", "Judgement", "심판",
     "Judgement, rebirth, inner calling, absolution", "재생과 각성",
     ("judgement", "rebirth", "inner calling", "absolution"),
     ("심판", "재생", "각성", "구원"), "fire"),
    ("the-world", "The World", "세계",
     "Completion, accomplishment, travel, fulfillment", "완성과 성취",
     ("completion", "accomplishment", "travel", "fulfillment"),
     ("완성", "성취", "만족", "완결"), "earth"),
)

WANDS = (
    ("ace-of-wands", "Ace of Wands", "완드 에이스",
     "Inspiration, creative spark, new opportunity", "창조적 영감과 새로운 기회",
     ("inspiration", "creative spark", "new opportunity", "growth potential"),
     ("영감", "창조", "기회", "성장"), "fire"),
    ("two-of-wands", "Two of Wands", "완드 2",
     "Future planning, making decisions, leaving comfort zone", "미래 계획과 결정",
     ("future planning", "making decisions", "leaving comfort zone", "personal power"),
     ("계획", "결정", "도전", "권력"), "fire"),
    ("three-of-wands", "Three of Wands", "완드 3",
     "Expansion, foresight, overseas opportunities", "확장과 해외 기회",
     ("expansion", "foresight", "overseas opportunities", "looking ahead"),
     ("확장", "예견", "기회", "전망"), "fire"),
    ("four-of-wands", "Four of Wands", "완드 4",
     "Celebration, harmony, home, community", "축하와 조화로운 가정",
     ("celebration", "harmony", "home", "community"),
     ("축하", "조화", "가정", "공동체"), "fire"),
    ("five-of-wands", "Five of Wands", "완드 5",
     "Conflict, disagreements, competition, tension", "갈등과 경쟁",
     ("conflict", "disagreements", "competition", "tension"),
     ("갈등", "경쟁", "긴장", "불일치"), "fire"),
    ("six-of-wands", "Six of Wands", "완드 6",
     "Success, public recognition, progress, self-confidence", "성공과 인정",
     ("success", "public recognition", "progress", "self-confidence"),
     ("성공", "인정", "진전", "자신감"), "fire"),
    ("seven-of-wands", "Seven of Wands", "완드 7",
     "Challenge, competition, perseverance, defending position", "도전과 방어",
     ("challenge", "competition", "perseverance", "defending position"),
     ("도전", "경쟁", "인내", "방어"), "fire"),
    ("eight-of-wands", "Eight of Wands", "완드 8",
     "Swiftness, speed, progress, quick decisions", "신속함과 빠른 진전",
     ("swiftness", "speed", "progress", "quick decisions"),
     ("신속", "속도", "진전", "결정"), "fire"),
    ("nine-of-wands", "Nine of Wands", "완드 9",
     "Persistence, test of faith, resilience, boundaries", "지속성과 시험",
     ("persistence", "test of faith", "resilience", "boundaries"),
     ("지속", "시험", "회복력", "경계"), "fire"),
    ("ten-of-wands", "Ten of Wands", "완드 10",
     "Burden, extra responsibility, hard work, completion", "부담과 책임의 완성",
     ("burden", "extra responsibility", "hard work", "completion"),
     ("부담", "책임", "노력", "완성"), "fire"),
    ("page-of-wands", "Page of Wands", "완드 페이지",
     "Inspiration, ideas, discovery, limitless potential", "영감과 무한한 가능성",
     ("inspiration", "ideas", "discovery", "limitless potential"),
     ("영감", "아이디어", "발견", "가능성"), "fire"),
    ("knight-of-wands", "Knight of Wands", "완드 기사",
     "Energy, passion, inspired action, adventure", "에너지와 열정적 행동",
     ("energy", "passion", "inspired action", "adventure"),
     ("에너지", "열정", "행동", "모험"), "fire"),
    ("queen-of-wands", "Queen of Wands", "완드 여왕",
     "Courage, confidence, independence, social butterfly", "용기와 독립성",
     ("courage", "confidence", "independence", "social butterfly"),
     ("용기", "자신감", "독립", "사교성"), "fire"),
    ("king-of-wands", "King of Wands", "완드 왕",
     "Leadership, vision, honour, big picture", "리더십과 비전",
     ("leadership", "vision", "honour", "big picture"),
     ("리더십", "비전", "명예", "큰 그림"), "fire"),
)

CUPS = (
    ("ace-of-cups", "Ace of Cups", "컵 에이스",
     "Love, compassion, creativity, new relationship", "사랑과 새로운 관계",
     ("love", "compassion", "creativity", "new relationship"),
     ("사랑", "연민", "창조", "관계"), "water"),
    ("two-of-cups", "Two of Cups", "컵 2",
     "Unified love, partnership, mutual attraction", "통합된 사랑과 파트너십",
     ("unified love", "partnership", "mutual attraction", "relationships"),
     ("사랑", "파트너십", "끌림", "관계"), "water"),
    ("three-of-cups", "Three of Cups", "컵 3",
     "Celebration, friendship, creativity, community", "축하와 우정",
     ("celebration", "friendship", "creativity", "community"),
     ("축하", "우정", "창조", "공동체"), "water"),
    ("four-of-cups", "Four of Cups", "컵 4",
     "Meditation, contemplation, apathy, reevaluation", "명상과 재평가",
     ("meditation", "contemplation", "apathy", "reevaluation"),
     ("명상", "사고", "무관심", "재평가"), "water"),
    ("five-of-cups", "Five of Cups", "컵 5",
     "Regret, failure, disappointment, pessimism", "후회와 실망",
     ("regret", "failure", "disappointment", "pessimism"),
     ("후회", "실패", "실망", "비관"), "water"),
    ("six-of-cups", "Six of Cups", "컵 6",
     "Revisiting the past, childhood memories, innocence", "과거 회상과 순수함",
     ("revisiting the past", "childhood memories", "innocence", "nostalgia"),
     ("과거", "추억", "순수", "향수"), "water"),
    ("seven-of-cups", "Seven of Cups", "컵 7",
     "Opportunities, choices, wishful thinking, illusion", "기회와 선택의 환상",
     ("opportunities", "choices", "wishful thinking", "illusion"),
     ("기회", "선택", "희망", "환상"), "water"),
    ("eight-of-cups", "Eight of Cups", "컵 8",
     "Disappointment, abandonment, withdrawal, escapism", "실망과 포기",
     ("disappointment", "abandonment", "withdrawal", "escapism"),
     ("실망", "포기", "철수", "도피"), "water"),
    ("nine-of-cups", "Nine of Cups", "컵 9",
     "Contentment, satisfaction, gratitude, wish come true", "만족과 소망 성취",
     ("contentment", "satisfaction", "gratitude", "wish come true"),
     ("만족", "감사", "성취", "소망"), "water"),
    ("ten-of-cups", "Ten of Cups", "컵 10",
     "Harmony, marriage, happiness, alignment", "조화와 행복한 결혼",
     ("harmony", "marriage", "happiness", "alignment"),
     ("조화", "결혼", "행복", "일치"), "water"),
    ("page-of-cups", "Page of Cups", "컵 페이지",
     "Creative opportunities, intuitive messages, curiosity", "창조적 기회와 직감",
     ("creative opportunities", "intuitive messages", "curiosity", "new ideas"),
     ("창조", "직감", "호기심", "아이디어"), "water"),
    ("knight-of-cups", "Knight of Cups", "컵 기사",
     "Romance, charm, knight in shining armor, imagination", "로맨스와 매력",
     ("romance", "charm", "knight in shining armor", "imagination"),
     ("로맨스", "매력", "기사", "상상력"), "water"),
    ("queen-of-cups", "Queen of Cups", "컵 여왕",
     "Compassion, care, emotional stability, intuitive", "연민과 감정적 안정",
     ("compassion", "care", "emotional stability", "intuitive"),
     ("연민", "보살핌", "안정", "직관적"), "water"),
    ("king-of-cups", "King of Cups", "컵 왕",
     "Emotional balance, compassion, generosity, diplomatic", "감정적 균형과 관용",
     ("emotional balance", "compassion", "generosity", "diplomatic"),
     ("균형", "연민", "관대함", "외교적"), "water"),
)

SWORDS = (
    ("ace-of-swords", "Ace of Swords", "검 에이스",
     "Breakthrough, clarity, sharp mind, new ideas", "돌파구와 명확한 사고",
     ("breakthrough", "clarity", "sharp mind", "new ideas"),
     ("돌파", "명확", "날카로운 사고", "아이디어"), "air"),
    ("two-of-swords", "Two of Swords", "검 2",
     "Difficult decisions, weighing options, indecision", "어려운 결정과 우유부단",
     ("difficult decisions", "weighing options", "indecision", "blocked emotions"),
     ("어려운 결정", "선택", "우유부단", "감정 차단"), "air"),
    ("three-of-swords", "Three of Swords", "검 3",
     "Heartbreak, betrayal, sorrow, pain", "상심과 배신",
     ("heartbreak", "betrayal", "sorrow", "pain"),
     ("상심", "배신", "슬픔", "고통"), "air"),
    ("four-of-swords", "Four of Swords", "검 4",
     "Rest, relaxation, meditation, contemplation", "휴식과 명상",
     ("rest", "relaxation", "meditation", "contemplation"),
     ("휴식", "이완", "명상", "사고"), "air"),
    ("five-of-swords", "Five of Swords", "검 5",
     "Conflict, disagreements, competition, defeat", "갈등과 패배",
     ("conflict", "disagreements", "competition", "defeat"),
     ("갈등", "불일치", "경쟁", "패배"), "air"),
    ("six-of-swords", "Six of Swords", "검 6",
     "Transition, change, rite of passage, releasing baggage", "전환과 변화",
     ("transition", "change", "rite of passage", "releasing baggage"),
     ("전환", "변화", "통과의례", "짐 내려놓기"), "air"),
    ("seven-of-swords", "Seven of Swords", "검 7",
     "Betrayal, deception, getting away with something", "배신과 속임수",
     ("betrayal", "deception", "getting away with something", "stealth"),
     ("배신", "속임", "도망", "은밀함"), "air"),
    ("eight-of-swords", "Eight of Swords", "검 8",
     "Isolation, restriction, self-imposed prison", "고립과 자가 감금",
     ("isolation", "restriction", "self-imposed prison", "victim mentality"),
     ("고립", "제한", "자가감금", "피해의식"), "air"),
    ("nine-of-swords", "Nine of Swords", "검 9",
     "Anxiety, worry, fear, depression", "불안과 걱정",
     ("anxiety", "worry", "fear", "depression"),
     ("불안", "걱정", "두려움", "우울"), "air"),
    ("ten-of-swords", "Ten of Swords", "검 10",
     "Painful endings, deep wounds, betrayal, rock bottom", "고통스러운 끝과 바닥",
     ("painful endings", "deep wounds", "betrayal", "rock bottom"),
     ("고통스러운 끝", "깊은 상처", "배신", "바닥"), "air"),
    ("page-of-swords", "Page of Swords", "검 페이지",
     "New ideas, curiosity, thirst for knowledge", "새로운 아이디어와 호기심",
     ("new ideas", "curiosity", "thirst for knowledge", "vigilance"),
     ("아이디어", "호기심", "지식욕", "경계심"), "air"),
    ("knight-of-swords", "Knight of Swords", "검 기사",
     "Ambitious, action-oriented, driven to succeed", "야망과 행동 지향",
     ("ambitious", "action-oriented", "driven to succeed", "fast thinking"),
     ("야망", "행동지향", "성공욕구", "빠른사고"), "air"),
    ("queen-of-swords", "Queen of Swords", "검 여왕",
     "Independence, unbiased judgement, clear boundaries", "독립성과 명확한 판단",
     ("independence", "unbiased judgement", "clear boundaries", "direct communication"),
     ("독립성", "공정한 판단", "명확한 경계", "직접적 소통"), "air"),
    ("king-of-swords", "King of Swords", "검 왕",
     "Mental clarity, intellectual power, authority", "정신적 명료함과 권위",
     ("mental clarity", "intellectual power", "authority", "truth"),
     ("정신적 명료함", "지적 권력", "권위", "진실"), "air"),
)

PENTACLES = (
    ("ace-of-pentacles", "Ace of Pentacles", "펜타클 에이스",
     "A new financial or career opportunity, manifestation", "새로운 재정적 기회",
     ("new financial opportunity", "manifestation", "abundance", "new business"),
     ("재정적 기회", "현실화", "풍요", "새사업"), "earth"),
    ("two-of-pentacles", "Two of Pentacles", "펜타클 2",
     "Multiple priorities, time management, prioritisation", "다중 우선순위와 시간 관리",
     ("multiple priorities", "time management", "prioritisation", "adaptability"),
     ("다중 우선순위", "시간관리", "우선순위", "적응력"), "earth"),
    ("three-of-pentacles", "Three of Pentacles", "펜타클 3",
     "Teamwork, collaboration, learning, implementation", "팀워크와 협력",
     ("teamwork", "collaboration", "learning", "implementation"),
     ("팀워크", "협력", "학습", "실행"), "earth"),
    ("four-of-pentacles", "Four of Pentacles", "펜타클 4",
     "Saving money, security, conservatism, scarcity", "돈 저축과 보안",
     ("saving money", "security", "conservatism", "scarcity"),
     ("돈 저축", "보안", "보수주의", "부족함"), "earth"),
    ("five-of-pentacles", "Five of Pentacles", "펜타클 5",
     "Financial loss, poverty, lack mindset, isolation", "재정적 손실과 고립",
     ("financial loss", "poverty", "lack mindset", "isolation"),
     ("재정적 손실", "빈곤", "결핍사고", "고립"), "earth"),
    ("six-of-pentacles", "Six of Pentacles", "펜타클 6",
     "Sharing wealth, generosity, charity, fairness", "부의 나눔과 관대함",
     ("sharing wealth", "generosity", "charity", "fairness"),
     ("부의 나눔", "관대함", "자선", "공정함"), "earth"),
    ("seven-of-pentacles", "Seven of Pentacles", "펜타클 7",
     "Long-term view, sustainable results, perseverance", "장기적 관점과 인내",
     ("long-term view", "sustainable results", "perseverance", "investment"),
     ("장기적 관점", "지속가능한 결과", "인내", "투자"), "earth"),
    ("eight-of-pentacles", "Eight of Pentacles", "펜타클 8",
     "Apprenticeship, repetitive tasks, mastery, skill development", "견습과 기술 개발",
     ("apprenticeship", "repetitive tasks", "mastery", "skill development"),
     ("견습", "반복작업", "숙련", "기술개발"), "earth"),
    ("nine-of-pentacles", "Nine of Pentacles", "펜타클 9",
     "Abundance, luxury, self-reliance, financial independence", "풍요와 재정적 독립",
     ("abundance", "luxury", "self-reliance", "financial independence"),
     ("풍요", "사치", "자립", "재정적 독립"), "earth"),
    ("ten-of-pentacles", "Ten of Pentacles", "펜타클 10",
     "Wealth, financial security, family, long-term success", "부와 가족의 성공",
     ("wealth", "financial security", "family", "long-term success"),
     ("부", "재정적 안정", "가족", "장기적 성공"), "earth"),
    ("page-of-pentacles", "Page of Pentacles", "펜타클 페이지",
     "Learning, studying, new opportunities, hard work", "학습과 새로운 기회",
     ("learning", "studying", "new opportunities", "hard work"),
     ("학습", "공부", "새기회", "근면"), "earth"),
    ("knight-of-pentacles", "Knight of Pentacles", "펜타클 기사",
     "Hard work, productivity, routine, conservatism", "근면과 생산성",
     ("hard work", "productivity", "routine", "conservatism"),
     ("근면", "생산성", "일상", "보수주의"), "earth"),
    ("queen-of-pentacles", "Queen of Pentacles", "펜타클 여왕",
     "Nurturing, practical, providing financially, down-to-earth", "보살핌과 실용성",
     ("nurturing", "practical", "providing financially", "down-to-earth"),
     ("보살핌", "실용적", "재정적 지원", "현실적"), "earth"),
    ("king-of-pentacles", "King of Pentacles", "펜타클 왕",
     "Financial success, security, disciplined, abundant", "재정적 성공과 풍요",
     ("financial success", "security", "disciplined", "abundant"),
     ("재정적 성공", "안정", "절제된", "풍부한"), "earth"),
)

MINOR_ARCANA = {
    "wands": WANDS,
    "cups": CUPS,
    "swords": SWORDS,
    "pentacles": PENTACLES,
}
