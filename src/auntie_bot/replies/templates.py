"""Auntie's reply pools. ``{AMT}`` and ``{CAT}`` are filled per message."""

from __future__ import annotations

ADD_NORMAL: tuple[str, ...] = (
    "Okay lah! {AMT} for {CAT} masuk liao ✅",
    "Recorded! {CAT} - {AMT}. Steady bompi-pi 💪",
    "Auntie write down already: {CAT} {AMT} ✍️",
    "Noted ah! {AMT} for {CAT}. Don't later say forget 😜",
    "Ka-ching! {CAT} at {AMT}. Wallet still breathing? 💸",
    "Shiok ah, {CAT} {AMT}. Small small also must track 👍",
    "Auntie file inside liao: {AMT} {CAT} 🗂️",
    "Registered hor: {AMT} for {CAT} ✅",
    "Got it got it: {AMT} {CAT}. Spend smart ah 😉",
    "Swee! {CAT} {AMT}. Keep the habit going 👏",
    "Auntie stamp chop: {AMT} for {CAT} 🧾",
    "Ok can! {AMT} {CAT}. Save first, flex later 😎",
    "Mark down liao: {CAT} {AMT}. On track ah 🚶",
    "Settle! {CAT} {AMT}. Solid like MRT timing 🚈",
    "Budget ninja move: {CAT} {AMT} 🥷",
    "Small small also count: {CAT} {AMT} 🔢",
)

ADD_HIGH: tuple[str, ...] = (
    "Wah {AMT} for {CAT}? Today treat yourself ah 🤭",
    "Oof, {AMT} on {CAT}. Heart pain a bit or not? 🫣",
    "Aiyo {AMT}! {CAT} premium version issit? 😅",
    "Steady lah big spender: {CAT} {AMT} 💼",
    "High SES vibes detected: {AMT} for {CAT} ✨",
    "Auntie faint a bit but record already: {AMT} {CAT} 😵‍💫",
    "Wallet say \"eh bro...\": {AMT} {CAT} 😂",
    "Ok lah, sometimes must enjoy: {CAT} {AMT} 🌟",
    "Eh careful ah, BIG one: {AMT} {CAT} 🧨",
    "Shiok but pricey: {AMT} for {CAT}. Balance balance ya ⚖️",
    "Your card crying softly: {AMT} on {CAT} 😭",
    "Wallet perspiring: {AMT} for {CAT} 🥵",
    "Eh careful later month end: {CAT} {AMT} 📆",
    "Later drink plain water balance: {CAT} {AMT} 🚰",
)

ADD_ULTRA: tuple[str, ...] = (
    "WAH LAO {AMT} for {CAT}?! Auntie need to sit down first 🪑",
    "Bank manager wave also cannot stop you: {AMT} {CAT} 🏦",
    "Confirm VIP already: {CAT} {AMT} 👑",
    "Are you buying the shop or the {CAT}? {AMT} 😅",
    "Big dragon spend spotted: {AMT} {CAT} 🐉",
    "Huat ah or ouch ah? {AMT} for {CAT} 🧧",
    "Legendary purchase unlocked: {CAT} {AMT} 🏆",
    "Wallet ICU level: {AMT} {CAT} 🏥",
    "Siao liao, {AMT} for {CAT}. But Auntie proud you track 👍",
    "After this ah, drink tap water few days ok? {AMT} {CAT} 🚰",
    "Hope got warranty hor: {CAT} {AMT} 🧾",
    "Ok log liao, now hibernate spending a bit: {CAT} {AMT} 🐻",
)

TODAY_SPICE: tuple[str, ...] = (
    "Today you very active ah, third record and counting 🔥",
    "Eh, today many entries liao. Wallet need rest or not? 😮‍💨",
    "Auntie counting with you non-stop today 🧮",
    "Track so diligent today, Auntie give you gold star ⭐",
    "Today shopping marathon issit? 🏃",
    "Many small small today, careful become big big ah 🐘",
)

UNDO_LINES: tuple[str, ...] = (
    "Okay, Auntie cancel liao: {CAT} {AMT} ↩️",
    "Poof! {AMT} for {CAT} gone already 🪄",
    "Undo done. {CAT} {AMT} never happen ok 🤫",
    "Auntie erase clean clean: {CAT} {AMT} 🧽",
    "Taken back: {AMT} {CAT}. Type properly next time hor 😉",
    "Remove liao: {CAT} {AMT}. Like never spend 🙈",
)

LIST_HEADERS: tuple[str, ...] = (
    "📒 Auntie's book, latest 5:",
    "🧾 Your recent spending, newest first:",
    "👀 Auntie check for you, last 5 records:",
    "📋 Here lah, your latest entries:",
    "🗂️ Fresh from Auntie's file:",
)

SUMMARY_WEEK_HEADERS: tuple[str, ...] = (
    "📊 This week spending, Auntie count already:",
    "🗓️ Week so far ah, here is the damage:",
    "👵 Auntie weekly report card:",
    "💸 Since Monday you spend like this:",
    "📈 Weekly rundown, no need to scared:",
)

SUMMARY_MONTH_HEADERS: tuple[str, ...] = (
    "📊 This month spending, Auntie tally liao:",
    "🗓️ Month so far, let's see ah:",
    "👵 Auntie monthly report card:",
    "💰 From the 1st until now, you spend:",
    "📈 Monthly rundown, breathe first:",
)

SUMMARY_FOOTERS: tuple[str, ...] = (
    "Steady lah, keep tracking! 💪",
    "Know where money go, half the battle won 🏆",
    "Auntie proud of you for tracking 🥹",
    "Next week try spend less on the top one ok? 😉",
    "Save a bit more, future you say thank you 🙏",
)

TIPS: tuple[str, ...] = (
    "💡 Tip: Bring your own kopi one week, see how much you save ☕",
    "💡 Tip: Wait 24 hours before any big buy. Still want? Then ok lah.",
    "💡 Tip: Set aside savings first when salary come, spend the rest 🏦",
    "💡 Tip: Unsubscribe from shopping emails, eyes no see heart no pain 📧",
    "💡 Tip: Cook at home two nights a week, wallet very happy 🍳",
    "💡 Tip: Check your subscriptions, sure got one you forget 📺",
    "💡 Tip: Pay with cash for makan, you feel every dollar go out 💵",
    "💡 Tip: Try one no-spend day every week, like budget detox 🧘",
)

MENU_LINES: tuple[str, ...] = (
    "👵 Auntie Can Count One Menu:",
    "- $20 kopi or 20 lunch → Record an expense",
    "- shoes 200 or kopi $4.50 → Category first also can",
    "- Summary → This week total",
    "- Summary month → This month total",
    "- List → Last 5 records",
    "- Undo → Remove last entry",
    "- Tip → Savings advice",
    "",
    "Examples:",
    "• 3.5 kopi",
    "• $4.20 lunch",
    "• pc repair 133.78",
)

USAGE_HELP = (
    "Hello dear 👋 Start with amount or category.\n"
    "Examples:\n"
    "- $5 kopi  (amount first)\n"
    "- pc repair 133.78  (category first)\n"
    "- shoes $200\n"
    "Type menu to see options lah!"
)

UNIDENTIFIED = "Aiyo, cannot identify you. Please try again later."
NO_RECORDS = "Aiyo, no record yet 😅 Try $5 lunch first!"
NOTHING_TO_UNDO = "Nothing to undo lah 😅"
NO_SPENDING = "No spending {LABEL} yet. Try $5 lunch to start!"
STORE_FAILURE = "Aiyo, Auntie's book got problem just now. Please try again later 🙏"

__all__ = [
    "ADD_HIGH",
    "ADD_NORMAL",
    "ADD_ULTRA",
    "LIST_HEADERS",
    "MENU_LINES",
    "NOTHING_TO_UNDO",
    "NO_RECORDS",
    "NO_SPENDING",
    "STORE_FAILURE",
    "SUMMARY_FOOTERS",
    "SUMMARY_MONTH_HEADERS",
    "SUMMARY_WEEK_HEADERS",
    "TIPS",
    "TODAY_SPICE",
    "UNDO_LINES",
    "UNIDENTIFIED",
    "USAGE_HELP",
]
